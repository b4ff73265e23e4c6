#!/usr/bin/env python3
"""
Dictionary Summary UI
=====================
Rich-based summary of the active dictionary, shown by `xkcdpwd --info`.

Renders on stderr so passphrases on stdout stay pipeable. Falls back to
plain lines when stderr is not a terminal.

Usage:
    from xkcdpwd.ui import DictionarySummary, SummaryUI

    summary = DictionarySummary.from_dictionary(d, words=4, language="en")
    SummaryUI().show(summary)
"""

from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from .dictionary import Dictionary
from .entropy import MIN_ENTROPY, words_needed


@dataclass
class DictionarySummary:
    """Numbers describing one passphrase configuration."""
    language: str
    total_words: int
    active_words: int
    min_length: int
    max_length: int
    capitalize: str
    words: int
    entropy: float
    floor: float = MIN_ENTROPY

    @property
    def sufficient(self) -> bool:
        return self.entropy >= self.floor

    @property
    def words_needed(self) -> int:
        return words_needed(self.active_words, self.floor)

    @classmethod
    def from_dictionary(cls, d: Dictionary, words: int, language: str,
                        floor: float = MIN_ENTROPY) -> "DictionarySummary":
        return cls(
            language=language,
            total_words=d.total,
            active_words=d.length(),
            min_length=d.min_word_length,
            max_length=d.max_word_length,
            capitalize=d.capitalize,
            words=words,
            entropy=d.entropy(words),
            floor=floor,
        )


def _limit(n: int) -> str:
    return str(n) if n > 0 else "none"


class SummaryUI:
    """Prints a DictionarySummary to stderr."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)

    def rows(self, s: DictionarySummary) -> list:
        """(label, value) pairs shown in both display modes."""
        needed = s.words_needed
        return [
            ("Language", s.language),
            ("Words loaded", str(s.total_words)),
            ("Words in range", str(s.active_words)),
            ("Length limits", f"min {_limit(s.min_length)}, max {_limit(s.max_length)}"),
            ("Capitalization", s.capitalize),
            ("Words per passphrase", str(s.words)),
            ("Entropy", f"{s.entropy:.1f} bits (minimum {s.floor:.0f})"),
            ("Words needed", str(needed) if needed else "unreachable"),
        ]

    def render(self, s: DictionarySummary) -> Panel:
        table = Table(box=None, show_header=False, padding=(0, 1))
        table.add_column("Label", style="dim")
        table.add_column("Value")
        for label, value in self.rows(s):
            style = "bold"
            if label == "Entropy":
                style = "bold green" if s.sufficient else "bold red"
            table.add_row(label, Text(value, style=style))
        return Panel(
            table,
            title="[bold]xkcdpwd dictionary[/bold]",
            border_style="blue",
            box=box.ROUNDED,
            expand=False,
        )

    def show(self, s: DictionarySummary) -> None:
        if self.console.is_terminal:
            self.console.print(self.render(s))
            return
        width = max(len(label) for label, _ in self.rows(s))
        for label, value in self.rows(s):
            self.console.print(f"{label + ':':<{width + 2}}{value}",
                               markup=False, highlight=False)
