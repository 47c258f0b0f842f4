#!/usr/bin/env python
"""Serve the products API on the fixed port."""

import logging

import uvicorn

from productapi.config import settings
from productapi.logging_config import setup_logging

if __name__ == "__main__":
    setup_logging(settings.log_level, settings.log_file or None)
    logging.getLogger("productapi").info("Server running on http://localhost:%d", settings.port)
    uvicorn.run("productapi.main:app", host="0.0.0.0", port=settings.port, log_level="warning")
