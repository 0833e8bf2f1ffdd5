# cli.py
import sys
from datetime import datetime
from typing import Dict, Any, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from app.settings import CATALOG_BASE_URL
from sdk.pystore import CatalogClient, error_message

console = Console()
c = CatalogClient(base_url=CATALOG_BASE_URL)

# Global state for status messages and caching
status_message = "Ready"
seen_ids = {"1", "2", "3"}
seen_categories = {"Electronics"}

# Custom prompt style for prompt_toolkit
custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_product(p: Dict[str, Any]):
    table = Table(
        title=f"📦 Product {p.get('id', '?')}",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=6)
    table.add_column("Name", style="bold", width=20)
    table.add_column("Description", width=28)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Stock", justify="right", width=8)
    table.add_column("Category", width=15)
    table.add_column("Image", width=20)

    table.add_row(
        str(p.get("id", "N/A")),
        p.get("name", "N/A"),
        p.get("description", ""),
        f"${p.get('price', 0):.2f}",
        str(p.get("stock", 0)),
        p.get("category", "-"),
        p.get("imageUrl", "-"),
    )
    console.print(table)


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner.
    Returns (ok, result); failures are reported through status_message.
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
    except Exception as e:
        status_message = f"Error: {error_message(e)}"
        console.print(show_status(status_message, False))
        return False, None

    if success_msg:
        status_message = success_msg
        console.print(show_status(success_msg, True))
    return True, result


# ---------------------------
# Layout and input helpers
# ---------------------------
def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Catalog SDK",
        "[bold blue]Product Catalog CLI[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_float(message: str, default: float = 10.0) -> float:
    while True:
        raw = Prompt.ask(message, default=str(default))
        try:
            return float(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


def ask_product_id() -> str:
    return prompt_with_autocomplete(
        "Enter product ID",
        completer=WordCompleter(sorted(seen_ids, key=lambda s: (len(s), s))),
    ).strip()


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message

    console.clear()
    console.print(create_header())

    while True:
        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_row("1", "ℹ️ Get product by ID")
        menu_table.add_row("2", "✏️ Replace product details")
        menu_table.add_row("3", "❤️ Health check")
        menu_table.add_row("q", "👋 Quit")
        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter(["1", "2", "3", "q", "quit", "exit"])
        ).strip()

        if choice == "1":
            pid = ask_product_id()
            ok, resp = try_api(c.get_product, pid, success_msg=f"Product {pid} details loaded")
            if ok:
                seen_ids.add(pid)
                show_product(resp)

        elif choice == "2":
            pid = ask_product_id()
            # prefill from the current record so an edit only retypes what changes
            ok, current = try_api(c.get_product, pid)
            if not ok:
                continue
            show_product(current)
            name = prompt_with_autocomplete("Product name", default=current.get("name", ""))
            description = prompt_with_autocomplete("Description", default=current.get("description", ""))
            price = ask_float("💰 Price", default=current.get("price", 0.0))
            stock = IntPrompt.ask("📦 Stock", default=current.get("stock", 0))
            category = prompt_with_autocomplete(
                "🏷️ Category",
                completer=WordCompleter(sorted(seen_categories), ignore_case=True),
                default=current.get("category", ""),
            )
            image_url = prompt_with_autocomplete("🖼️ Image URL", default=current.get("imageUrl", ""))
            if not Confirm.ask(f"Replace product {pid}?"):
                continue
            ok, _ = try_api(
                c.update_product_details, pid, name, price, stock,
                description=description,
                category=category or None,
                image_url=image_url or None,
                success_msg=f"Product {pid} updated",
            )
            if ok:
                if category:
                    seen_categories.add(category)
                ok, resp = try_api(c.get_product, pid)
                if ok:
                    show_product(resp)

        elif choice == "3":
            ok, resp = try_api(c.health)
            if ok:
                console.print(show_status(f"Server says {resp}", True))

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Goodbye! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


def main():
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
