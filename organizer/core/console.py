"""Status glyphs shared by the connection manager and the menu."""

from typing import Callable

SUCCESS = "✅"
WARNING = "⚠️"
FAILURE = "❌"

Output = Callable[[str], None]


def status(glyph: str, text: str) -> str:
    return f"{glyph} {text}"
