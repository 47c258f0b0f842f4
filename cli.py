# cli.py - interactive client for the products API
import os
import sys
from datetime import datetime
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

import requests

from sdk.pyproducts import ProductClient

console = Console()
c = ProductClient(
    base_url=os.getenv("PRODUCTS_API_URL", "http://127.0.0.1:3000"),
    api_key=os.getenv("PRODUCTS_API_KEY", "123456"),
)

# Status line and autocomplete caches
status_message = "Ready"
product_cache: List[Dict[str, Any]] = []

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]], title: str = "📦 Products"):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title=title,
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=36)
    table.add_column("Name", style="bold", width=20)
    table.add_column("Description", width=28)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Category", width=14)
    table.add_column("Stock", justify="center", width=7)

    for p in products:
        price = p.get("price")
        price_text = f"${price:.2f}" if isinstance(price, (int, float)) else str(price)
        in_stock = p.get("inStock")
        table.add_row(
            str(p.get("id", "N/A")),
            str(p.get("name", "N/A")),
            str(p.get("description", "")),
            price_text,
            str(p.get("category", "N/A")),
            "[green]yes[/green]" if in_stock else "[red]no[/red]",
        )
    console.print(table)


def show_page(listing: Dict[str, Any]):
    page, limit = listing.get("page"), listing.get("limit")
    show_products(listing.get("data", []), title=f"📦 Products (page {page}, limit {limit})")
    console.print(f"[dim]{listing.get('total', 0)} matching product(s) in total[/dim]")


def show_stats(stats: Dict[str, Any]):
    counts = stats.get("countByCategory", {})
    if not counts:
        console.print("[italic yellow]Store is empty[/italic yellow]")
        return

    table = Table(title="📊 Products per category", box=box.ROUNDED, header_style="bold yellow")
    table.add_column("Category", width=24)
    table.add_column("Count", justify="right", width=8)
    for category, count in sorted(counts.items(), key=lambda kv: (-kv[1], kv[0])):
        table.add_row(category, str(count))
    console.print(table)


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper
# ---------------------------
def _error_text(e: Exception) -> str:
    if isinstance(e, requests.exceptions.HTTPError) and e.response is not None:
        try:
            return f"HTTP {e.response.status_code}: {e.response.json().get('error', e.response.text)}"
        except ValueError:
            return f"HTTP {e.response.status_code}: {e.response.text}"
    return str(e)


def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner and returns its result.
    On failure prints the API error and returns None.
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)

        if success_msg:
            status_message = success_msg
            console.print(show_status(success_msg, True))
        return result
    except (requests.exceptions.RequestException, ValueError) as e:
        status_message = f"Error: {_error_text(e)}"
        console.print(show_status(status_message, False))
        return None


# ---------------------------
# Autocompletion helpers
# ---------------------------
def refresh_product_cache():
    global product_cache
    # the list endpoint pages; one large page is enough for completion
    listing = try_api(c.list_products, limit=1000)
    product_cache = listing.get("data", []) if listing else []


def get_product_completer():
    if not product_cache:
        refresh_product_cache()
    ids = [str(p.get("id", "")) for p in product_cache]
    return WordCompleter([i for i in ids if i], ignore_case=True)


def get_category_completer():
    categories = {str(p.get("category", "")) for p in product_cache}
    return WordCompleter(sorted(cat for cat in categories if cat), ignore_case=True)


# ---------------------------
# Layout and Header
# ---------------------------
def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Products API",
        f"[bold blue]{c.base_url}[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Input helpers with autocomplete
# ---------------------------
def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_float(message: str, default: float = 10.0) -> float:
    while True:
        raw = Prompt.ask(message, default=str(default))
        try:
            return float(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


def ask_product_fields(current: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    current = current or {}
    name = prompt_with_autocomplete("Product name", default=str(current.get("name", "")))
    description = prompt_with_autocomplete("Description", default=str(current.get("description", "")))
    price = ask_float("💰 Price", default=current.get("price", 10.0))
    category = prompt_with_autocomplete(
        "🏷️ Category", completer=get_category_completer(), default=str(current.get("category", "general"))
    )
    in_stock = Confirm.ask("📦 In stock?", default=bool(current.get("inStock", True)))
    return {"name": name, "description": description, "price": price,
            "category": category, "in_stock": in_stock}


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message

    console.clear()
    console.print(create_header())
    refresh_product_cache()

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "📦 List products", "5", "✏️ Replace product"),
            ("2", "🔍 Search products", "6", "🗑️ Delete product"),
            ("3", "➕ Create product", "7", "📊 Category stats"),
            ("4", "ℹ️ Get product by ID", "q", "👋 Quit"),
        ]
        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 8)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            category = prompt_with_autocomplete("Category (blank for all)", completer=get_category_completer())
            page = IntPrompt.ask("Page", default=1)
            limit = IntPrompt.ask("Per page", default=10)
            listing = try_api(c.list_products, category.strip() or None, page, limit,
                              success_msg="Products loaded")
            if listing is not None:
                show_page(listing)

        elif choice == "2":
            term = prompt_with_autocomplete("Search names for")
            res = try_api(c.search_products, term, success_msg=f"Search for '{term}' completed")
            if res is not None:
                if "error" in res:
                    console.print(f"[yellow]{res['error']}[/yellow]")
                else:
                    show_products(res.get("results", []), title=f"🔍 {res.get('count', 0)} match(es)")

        elif choice == "3":
            fields = ask_product_fields()
            resp = try_api(c.create_product, **fields,
                           success_msg=f"Product '{fields['name']}' created")
            if resp:
                console.print(Panel(f"Created product: [green]{resp['id']}[/green]"))
                refresh_product_cache()

        elif choice == "4":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            resp = try_api(c.get_product, pid, success_msg=f"Product {pid} loaded")
            if resp:
                show_products([resp])

        elif choice == "5":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            current = try_api(c.get_product, pid)
            if current is None:
                continue
            fields = ask_product_fields(current)
            resp = try_api(c.replace_product, pid, **fields, success_msg=f"Product {pid} replaced")
            if resp:
                show_products([resp])
                refresh_product_cache()

        elif choice == "6":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            if Confirm.ask(f"[red]Delete product {pid}?[/red]"):
                if try_api(c.delete_product, pid, success_msg=f"Product {pid} deleted"):
                    refresh_product_cache()

        elif choice == "7":
            resp = try_api(c.stats, success_msg="Stats loaded")
            if resp is not None:
                show_stats(resp)

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Bye! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
