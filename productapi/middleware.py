"""
Request processing stages that run ahead of the route logic.

Every request is logged by ``log_requests`` (an HTTP middleware), then each
route declares its own pipeline with ``pipeline(...)``: the JSON body is
parsed first, then the interceptors run in order.  An interceptor returns
``None`` to let the request continue or a response to stop it there; the
stopping response is raised as ``ShortCircuit`` and rendered by the
exception handler installed in ``main.create_app``.
"""

import json
import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.responses import Response

from .core import UNAUTHORIZED, ProductIn, validation_error

request_logger = logging.getLogger("productapi.requests")

# Largest JSON body accepted, in bytes (100kb).
MAX_BODY_BYTES = 100 * 1024


@dataclass
class RequestContext:
    request: Request
    body: Any = field(default_factory=dict)
    payload: Optional[ProductIn] = None


Interceptor = Callable[[RequestContext], Optional[Response]]


class ShortCircuit(Exception):
    """Raised by a pipeline to answer a request without reaching its handler."""

    def __init__(self, response: Response):
        super().__init__(response.status_code)
        self.response = response


def _finite(value: Any) -> Any:
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(v) for v in value]
    return value


class ProductJSONResponse(JSONResponse):
    """JSON response that writes infinite and NaN floats as ``null``.

    Numbers such as ``1e400`` in a request body decode to ``inf`` and are
    stored as sent, so every response has to be able to render them.
    """

    def render(self, content: Any) -> bytes:
        return super().render(_finite(content))


def error_response(status_code: int, message: str) -> JSONResponse:
    return ProductJSONResponse(status_code=status_code, content={"error": message})


# ---------------------------
# Request logger
# ---------------------------
def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


async def log_requests(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    url = request.url.path
    if request.url.query:
        url += "?" + request.url.query
    request_logger.info("[%s] %s %s", _timestamp(), request.method, url)
    return await call_next(request)


# ---------------------------
# Body parser
# ---------------------------
def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unexpected token {name} in JSON")


class BodyTooLarge(ValueError):
    pass


async def _read_body(request: Request, limit: int) -> bytes:
    declared = request.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > limit:
        raise BodyTooLarge(f"request body of {declared} bytes exceeds {limit}")
    chunks = []
    size = 0
    async for chunk in request.stream():
        size += len(chunk)
        if size > limit:
            raise BodyTooLarge(f"request body exceeds {limit} bytes")
        chunks.append(chunk)
    return b"".join(chunks)


async def parse_json_body(request: Request) -> Any:
    """Decode a JSON request body.

    Requests that are not ``application/json`` or carry no body parse to
    ``{}``.  Malformed JSON, NaN/Infinity literals, top-level primitives and
    bodies over ``MAX_BODY_BYTES`` raise ``ValueError``.
    """
    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if media_type != "application/json":
        return {}
    raw = await _read_body(request, MAX_BODY_BYTES)
    if not raw.strip():
        return {}
    body = json.loads(raw, parse_constant=_reject_constant)
    if not isinstance(body, (dict, list)):
        raise ValueError("JSON body must be an object or an array")
    return body


# ---------------------------
# Interceptors
# ---------------------------
def authenticate(ctx: RequestContext) -> Optional[Response]:
    expected = ctx.request.app.state.settings.api_key
    if ctx.request.headers.get("x-api-key") != expected:
        return error_response(401, UNAUTHORIZED)
    return None


def validate_product(ctx: RequestContext) -> Optional[Response]:
    message = validation_error(ctx.body)
    if message is not None:
        return error_response(400, message)
    ctx.payload = ProductIn.model_validate(ctx.body)
    return None


def pipeline(*interceptors: Interceptor) -> Callable[[Request], Awaitable[RequestContext]]:
    """Build a route dependency that parses the body and runs ``interceptors``."""

    async def run(request: Request) -> RequestContext:
        ctx = RequestContext(request=request, body=await parse_json_body(request))
        for interceptor in interceptors:
            response = interceptor(ctx)
            if response is not None:
                raise ShortCircuit(response)
        return ctx

    return run
