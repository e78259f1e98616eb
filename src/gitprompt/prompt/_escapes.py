"""ANSI color sequences wrapped in shell zero-width markers.

Shells measure the prompt's visible width to place the cursor, so escape
sequences must be enclosed in the shell's "non-printing" markers.
"""

from dataclasses import dataclass
from typing import Final, Literal

from gitprompt.config import ColorsConfig, Shell

type Segment = Literal[
    "branch",
    "behind",
    "ahead",
    "staged",
    "conflicts",
    "changed",
    "untracked",
    "clean",
]

ZERO_WIDTH_MARKERS: Final[dict[Shell, tuple[str, str]]] = {
    Shell.ZSH: ("%{", "%}"),
    Shell.BASH: ("\x01", "\x02"),
    Shell.NONE: ("", ""),
}

_BOLD: Final = 1
_RESET: Final = 0


def sgr(*params: int) -> str:
    """Build an ANSI Select Graphic Rendition sequence.

    Examples:
        >>> sgr(31, 1)
        '\\x1b[31;1m'
    """
    return "\x1b[" + ";".join(str(param) for param in params) + "m"


@dataclass(frozen=True, slots=True)
class Palette:
    """Escape sequences for each prompt segment.

    Attributes:
        shell: Shell whose zero-width markers wrap every sequence.
        colors: Segment colors.
    """

    shell: Shell
    colors: ColorsConfig

    def wrap(self, sequence: str) -> str:
        """Enclose an escape sequence in the shell's zero-width markers."""
        start, end = ZERO_WIDTH_MARKERS[self.shell]
        return f"{start}{sequence}{end}"

    def color(self, segment: Segment) -> str:
        """The wrapped color sequence for a segment."""
        code = getattr(self.colors, segment).sgr
        if self.colors.bold:
            return self.wrap(sgr(code, _BOLD))
        return self.wrap(sgr(code))

    @property
    def reset(self) -> str:
        """The wrapped reset sequence."""
        return self.wrap(sgr(_RESET))
