"""Text styling used in failure messages.

Each style is a plain ``str -> str`` transform. Styling is skipped entirely
when the active configuration has ``no_color`` set.
"""

from __future__ import annotations

from collections.abc import Callable

from rich.color import ColorSystem
from rich.style import Style

from expectkit.config import get_config


Styler = Callable[[str], str]


def styler(definition: str) -> Styler:
    """Build a transform applying a rich style definition such as ``"bold red"``."""
    style = Style.parse(definition)

    def apply(text: str) -> str:
        color_system = None if get_config().no_color else ColorSystem.EIGHT_BIT
        return style.render(str(text), color_system=color_system)

    return apply


DIM = styler("dim")
RECEIVED = styler("red")
EXPECTED = styler("green")
CYAN = styler("cyan")
INVERSE = styler("reverse")


__all__ = ["CYAN", "DIM", "EXPECTED", "INVERSE", "RECEIVED", "Styler", "styler"]
