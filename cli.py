# cli.py
import sys
from datetime import datetime
from typing import List, Dict, Any, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from app.config import PRODUCT_API_URL
from sdk.pyproducts import ProductClient

console = Console()
c = ProductClient(base_url=PRODUCT_API_URL)

# Global state for status messages and caching
status_message = "Ready"
product_cache: List[Dict[str, Any]] = []

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})

EDITABLE_FIELDS = ["name", "description", "price", "category", "inStock"]

# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]], title: str = "📦 Products Catalog"):
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
    table.add_column("ID", style="dim", width=12)
    table.add_column("Name", style="bold", width=20)
    table.add_column("Description", width=30)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Category", width=15)
    table.add_column("In stock", justify="center", width=9)

    for p in products:
        price = p.get("price")
        in_stock = p.get("inStock")
        table.add_row(
            str(p.get("id", "N/A")),
            str(p.get("name", "N/A")),
            str(p.get("description", "")),
            f"${price:.2f}" if isinstance(price, (int, float)) else str(price),
            str(p.get("category", "N/A")),
            "[green]yes[/green]" if in_stock else "[red]no[/red]"
        )
    console.print(table)

def show_page(listing: Dict[str, Any]):
    products = listing.get("products", [])
    show_products(products, title=f"📦 Page {listing.get('page')} ({len(products)} of {listing.get('total', 0)})")

def show_stats(stats: Dict[str, int]):
    if not stats:
        console.print("[italic yellow]No products in store[/italic yellow]")
        return
    table = Table(title="📊 Products per category", box=box.ROUNDED, header_style="bold yellow")
    table.add_column("Category", width=20)
    table.add_column("Count", justify="right", width=8)
    for category, count in stats.items():
        table.add_row(str(category), str(count))
    console.print(table)

def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")

# ---------------------------
# API wrapper
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner. Failures are reported in a
    red status panel and yield None; the menu loop carries on.
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
    except Exception as e:
        status_message = f"Error: {e}"
        console.print(show_status(f"Error: {e}", False))
        return None

# ---------------------------
# Autocompletion helpers
# ---------------------------
def refresh_cache():
    global product_cache
    listing = try_api(c.list_products, limit=1000)
    product_cache = listing.get("products", []) if listing else []

def get_product_completer():
    if not product_cache:
        refresh_cache()
    return WordCompleter([str(p.get("id", "")) for p in product_cache if p.get("id")], ignore_case=True)

def get_category_completer():
    categories = {str(p.get("category")) for p in product_cache if p.get("category")}
    return WordCompleter(sorted(categories), ignore_case=True)

def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Product API",
        f"[bold blue]{c.base_url}[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")

# ---------------------------
# Input helpers
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

def ask_field_value(field: str) -> Any:
    if field == "price":
        return ask_float("💰 New price", default=0.0)
    if field == "inStock":
        return Confirm.ask("In stock?")
    return prompt_with_autocomplete(f"New {field}")

# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message

    console.clear()
    console.print(create_header())
    refresh_cache()

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "📦 List products", "5", "✏️ Update product"),
            ("2", "🔍 Search products", "6", "🗑️ Delete product"),
            ("3", "ℹ️ Get product by ID", "7", "📊 Category stats"),
            ("4", "➕ Create product", "q", "👋 Quit"),
        ]
        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 8)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            category = prompt_with_autocomplete("Category (blank for all)", completer=get_category_completer()).strip()
            page = IntPrompt.ask("Page", default=1)
            limit = IntPrompt.ask("Per page", default=5)
            listing = try_api(c.list_products, category or None, page, limit, success_msg="Products loaded successfully")
            if listing is not None:
                show_page(listing)

        elif choice == "2":
            term = prompt_with_autocomplete("Enter search term")
            res = try_api(c.search_products, term, success_msg=f"Search for '{term}' completed")
            if res is not None:
                show_products(res)

        elif choice == "3":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            resp = try_api(c.get_product, pid, success_msg=f"Product {pid} details loaded")
            if resp:
                show_products([resp])

        elif choice == "4":
            name = prompt_with_autocomplete("Enter product name")
            description = prompt_with_autocomplete("Enter description")
            price = ask_float("💰 Price", default=10.0)
            category = prompt_with_autocomplete("🏷️ Category", completer=get_category_completer(), default="general")
            in_stock = Confirm.ask("In stock?", default=True)
            resp = try_api(
                c.create_product, name, description, price, category, in_stock,
                success_msg=f"Product '{name}' created successfully"
            )
            if resp:
                console.print(Panel(f"Created product: [green]{resp['id']}[/green]"))
                refresh_cache()

        elif choice == "5":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            field = prompt_with_autocomplete("Field to change", completer=WordCompleter(EDITABLE_FIELDS)).strip()
            value = ask_field_value(field)
            resp = try_api(c.update_product, pid, success_msg=f"Product {pid} updated", **{field: value})
            if resp:
                show_products([resp])
                refresh_cache()

        elif choice == "6":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            if Confirm.ask(f"[red]Delete product {pid}?[/red]"):
                resp = try_api(c.delete_product, pid, success_msg=f"Product {pid} deleted")
                if resp:
                    show_products(resp.get("deleted", []), title="🗑️ Deleted")
                    refresh_cache()

        elif choice == "7":
            stats = try_api(c.product_stats, success_msg="Stats loaded")
            if stats is not None:
                show_stats(stats)

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Goodbye! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")

if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
