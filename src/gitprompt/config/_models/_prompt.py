"""Prompt appearance configuration models.

Tokens, symbols and colors used by the prompt renderer. The defaults
reproduce the classic ``[branch<1>2|-1!1+2_3]`` layout.
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from gitprompt.config._models._common import Color


class TokensConfig(BaseModel):
    """Literal text framing the prompt.

    Attributes:
        prefix: Emitted before the branch label.
        suffix: Emitted last, before the newline.
        separator: Emitted between the branch part and the file counts.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    prefix: str = "["
    suffix: str = "]"
    separator: str = "|"


class SymbolsConfig(BaseModel):
    """Symbols preceding each count."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    behind: str = "<"
    ahead: str = ">"
    staged: str = "-"
    conflicts: str = "!"
    changed: str = "+"
    untracked: str = "_"
    clean: str = "="


class ColorsConfig(BaseModel):
    """Color of each prompt segment.

    Attributes:
        bold: Render every color in bold.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    bold: bool = True
    branch: Color = Color.BLACK
    behind: Color = Color.RED
    ahead: Color = Color.CYAN
    staged: Color = Color.YELLOW
    conflicts: Color = Color.RED
    changed: Color = Color.BLUE
    untracked: Color = Color.MAGENTA
    clean: Color = Color.GREEN


class StatusConfig(BaseModel):
    """Status enumeration settings.

    Attributes:
        include_ignored: Enumerate ignored files too. They never count
            towards any bucket, so this only costs time.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    include_ignored: bool = False
