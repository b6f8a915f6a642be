"""Interactive prompts for the attendance upload CLI, rendered with rich."""

from __future__ import annotations

from typing import Iterable, List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.text import Text

from .messages import t

__all__ = ["PortalConsole"]


class PortalConsole:
    """Thin wrapper over a rich ``Console`` with the prompts the CLI needs."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(highlight=False)

    def print(self, *renderables, **kwargs) -> None:
        self.console.print(*renderables, **kwargs)

    def headline(self, title: str, *, accent: str = "blue") -> None:
        self.console.print(Rule(title, style=accent))

    def text_block(self, text: str, *, tone: Optional[str] = None) -> None:
        self.console.print(Text(text, style=tone or ""))

    def panel(self, title: str, body: Iterable[str], *, accent: str = "magenta") -> None:
        self.console.print(Panel("\n".join(body), title=title, border_style=accent))

    def prompt(self, prompt_text: str, *, default: str = "", secret: bool = False) -> str:
        suffix = f" [{default}]" if default and not secret else ""
        try:
            prompt = Text(f"{prompt_text.strip()}{suffix} ", style="bold green")
            raw = self.console.input(prompt, password=secret)
        except EOFError:
            return default
        return raw.strip() or default

    def prompt_multiline(self, prompt_text: str) -> str:
        """Read lines until an empty line or EOF."""
        self.text_block(prompt_text, tone="dim")
        lines: List[str] = []
        while True:
            try:
                line = self.console.input("")
            except EOFError:
                break
            if not line.strip():
                break
            lines.append(line)
        return "\n".join(lines)

    def prompt_menu(self, title: str, options: List[str], *, default: int = 0) -> int:
        self.headline(title)
        for idx, label in enumerate(options, start=1):
            self.console.print(f" {idx}. {label}")
        while True:
            raw = self.prompt(t("option_prompt"), default=str(default + 1))
            if raw.isdigit() and 1 <= int(raw) <= len(options):
                return int(raw) - 1
            self.console.print(Text(t("invalid_option"), style="yellow"))

    def confirm(self, prompt_text: str, *, default: bool = True) -> bool:
        yes_no = "S/n" if default else "s/N"
        while True:
            raw = self.prompt(f"{prompt_text} [{yes_no}]").lower()
            if not raw:
                return default
            if raw in ("s", "si", "sí", "y", "yes"):
                return True
            if raw in ("n", "no"):
                return False
            self.console.print(Text(t("yes_or_no"), style="yellow"))
