"""Rich terminal display for shieldgen."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def format_bytes(n: int) -> str:
    """Format a payload size: 950 -> '950 B', 2048 -> '2.0 KB'."""
    if n < 1024:
        return f"{n} B"
    return f"{n / 1024:.1f} KB"


def print_render_result(result: dict) -> None:
    """Print where a rendered badge went and its response metadata."""
    lines: list[str] = []
    lines.append("")
    lines.append(f"  Badge saved to: [bold]{result.get('output', '')}[/]")
    lines.append(f"  Title:          {result.get('title', '')}")
    lines.append(f"  Size:           {format_bytes(result.get('size', 0))}")
    lines.append(f"  Content-Type:   {result.get('content_type', '')}")
    lines.append(f"  Cache-Control:  {result.get('cache_control', '')}")
    lines.append("")

    content = "\n".join(lines)
    panel = Panel(
        content,
        title="[bold]Badge Rendered[/]",
        box=box.ROUNDED,
        border_style="green",
        width=90,
    )
    console.print(panel)


def print_measure_result(text: str, width: float) -> None:
    """Print the measured width of a string."""
    table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("Text", style="bold")
    table.add_column("Width (110 units)", justify="right")
    table.add_column("Width (px @ 11px)", justify="right")
    table.add_row(text, f"{width:.2f}", f"{width / 10:.1f}")
    console.print(table)


def print_config(config: dict) -> None:
    """Print stored default options and the icon file."""
    table = Table(
        title="shieldgen config",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold",
    )
    table.add_column("Key", style="bold")
    table.add_column("Value")

    defaults = config.get("defaults") or {}
    for key in sorted(defaults):
        table.add_row(key, str(defaults[key]))
    if not defaults:
        table.add_row("[dim]no default options[/]", "")

    icons_path = config.get("icons_path")
    if icons_path:
        table.add_section()
        table.add_row("icons_path", str(icons_path))

    console.print(table)


def print_error(message: str) -> None:
    """Print an error panel to stderr."""
    panel = Panel(
        f"\n  {message}\n",
        title="[bold]Error[/]",
        box=box.ROUNDED,
        border_style="red",
        width=90,
    )
    err_console.print(panel)
