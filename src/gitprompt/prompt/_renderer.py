"""Prompt rendering."""

from typing import Final

from gitprompt.config import Config
from gitprompt.prompt._escapes import Palette, Segment
from gitprompt.prompt._models import DivergenceCounts, StatusCounts

# Display order of the file count segments
STATUS_SEGMENTS: Final[tuple[Segment, ...]] = (
    "staged",
    "conflicts",
    "changed",
    "untracked",
)


class PromptRenderer:
    """Format prompt results into the final line.

    Layout with the default configuration::

        [<branch><behind><ahead>|<staged><conflicts><changed><untracked>]

    Each segment is colored and followed by a reset. Zero counts are left
    out; when every file count is zero a single clean symbol is shown.

    Example:
        >>> renderer = PromptRenderer(Config(shell=Shell.NONE))
        >>> renderer.render("main", DivergenceCounts(), StatusCounts(untracked=1))
        '[\\x1b[30;1mmain\\x1b[0m|\\x1b[35;1m_1\\x1b[0m]\\n'
    """

    __slots__: Final = ("_config", "_palette")
    _config: Config
    _palette: Palette

    def __init__(self, config: Config) -> None:
        """Initialize the renderer.

        Args:
            config: Tokens, symbols, colors and shell to render with.
        """
        self._config = config
        self._palette = Palette(shell=config.shell, colors=config.colors)

    @property
    def config(self) -> Config:
        """The configuration this renderer uses."""
        return self._config

    def _segment(self, segment: Segment, text: str) -> str:
        return f"{self._palette.color(segment)}{text}{self._palette.reset}"

    def _count(self, segment: Segment, count: int) -> str:
        symbol: str = getattr(self._config.symbols, segment)
        return self._segment(segment, f"{symbol}{count}")

    def render(
        self,
        label: str,
        divergence: DivergenceCounts,
        counts: StatusCounts,
    ) -> str:
        """Render the prompt line.

        Args:
            label: The branch label.
            divergence: Ahead/behind counts.
            counts: File status counts.

        Returns:
            The prompt, terminated by a newline.
        """
        tokens = self._config.tokens
        parts = [tokens.prefix, self._segment("branch", label)]

        if divergence.behind > 0:
            parts.append(self._count("behind", divergence.behind))
        if divergence.ahead > 0:
            parts.append(self._count("ahead", divergence.ahead))

        parts.append(tokens.separator)

        for segment in STATUS_SEGMENTS:
            count: int = getattr(counts, segment)
            if count > 0:
                parts.append(self._count(segment, count))

        if counts.is_clean:
            parts.append(self._segment("clean", self._config.symbols.clean))

        parts.append(f"{tokens.suffix}\n")
        return "".join(parts)
