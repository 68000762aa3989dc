"""Humanizer - Terminal output"""

from typing import Dict, Optional

from rich import box
from rich.color import ColorSystem
from rich.console import Console
from rich.panel import Panel
from rich.style import Style
from rich.table import Table

from .patterns import TAG_STYLES

COLOR_SYSTEMS = {
    'standard': ColorSystem.STANDARD,
    '256': ColorSystem.EIGHT_BIT,
    'truecolor': ColorSystem.TRUECOLOR,
    'windows': ColorSystem.WINDOWS,
}


class Colorizer:
    """Decorate text according to its semantic tag"""

    def __init__(self, color_system: Optional[str] = 'standard'):
        if color_system is not None and color_system not in COLOR_SYSTEMS:
            raise ValueError(f"Unknown color system: {color_system}")
        self.color_system = color_system
        self.styles = {tag: Style.parse(style) for tag, style in TAG_STYLES.items()}

    @classmethod
    def for_console(cls, console: Console) -> 'Colorizer':
        return cls(console.color_system)

    @classmethod
    def plain(cls) -> 'Colorizer':
        return cls(None)

    @property
    def enabled(self) -> bool:
        return self.color_system is not None

    def colorize(self, text: str, tag: str) -> str:
        style = self.styles[tag]
        if not self.enabled:
            return text
        return style.render(text, color_system=COLOR_SYSTEMS[self.color_system])


def print_summary(report: Dict, console: Console):
    console.print("\n" + "═" * 50, style="cyan")
    console.print("            HUMANIZER SUMMARY", style="bold cyan")
    console.print("═" * 50, style="cyan")

    console.print(Panel.fit(
        f"Lines: [cyan]{report['lines']:,}[/]\n"
        f"Rewritten tokens: [cyan]{report['rewritten']:,}[/]",
        title="Summary",
        border_style="cyan"
    ))

    if report['by_tag']:
        table = Table(box=box.ROUNDED)
        table.add_column("Format", style="cyan")
        table.add_column("Rewrites", style="white")
        for tag, count in report['by_tag'].items():
            table.add_row(f"[{TAG_STYLES[tag]}]{tag}[/]", str(count))
        console.print(table)
