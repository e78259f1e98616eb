"""Unit tests for PromptRenderer."""

import pytest

from gitprompt.config import Config, Shell
from gitprompt.prompt import DivergenceCounts, PromptRenderer, StatusCounts

RESET = "\x1b[0m"
BLACK = "\x1b[30;1m"
RED = "\x1b[31;1m"
GREEN = "\x1b[32;1m"
YELLOW = "\x1b[33;1m"
BLUE = "\x1b[34;1m"
MAGENTA = "\x1b[35;1m"
CYAN = "\x1b[36;1m"


def _seg(color: str, text: str) -> str:
    return f"{color}{text}{RESET}"


@pytest.fixture
def renderer(plain_config: Config) -> PromptRenderer:
    return PromptRenderer(plain_config)


class TestRender:
    def test_clean_branch(self, renderer: PromptRenderer) -> None:
        line = renderer.render("main", DivergenceCounts(), StatusCounts())

        assert line == f"[{_seg(BLACK, 'main')}|{_seg(GREEN, '=')}]\n"

    def test_full_layout_order(self, renderer: PromptRenderer) -> None:
        line = renderer.render(
            "main",
            DivergenceCounts(ahead=2, behind=1),
            StatusCounts(untracked=3, conflicts=1, changed=2, staged=1),
        )

        assert line == (
            "["
            + _seg(BLACK, "main")
            + _seg(RED, "<1")
            + _seg(CYAN, ">2")
            + "|"
            + _seg(YELLOW, "-1")
            + _seg(RED, "!1")
            + _seg(BLUE, "+2")
            + _seg(MAGENTA, "_3")
            + "]\n"
        )

    def test_zero_counts_are_omitted(self, renderer: PromptRenderer) -> None:
        line = renderer.render(
            "dev", DivergenceCounts(behind=4), StatusCounts(changed=1)
        )

        assert line == (
            f"[{_seg(BLACK, 'dev')}{_seg(RED, '<4')}|{_seg(BLUE, '+1')}]\n"
        )
        assert "=" not in line

    def test_detached_label(self, renderer: PromptRenderer) -> None:
        line = renderer.render(":abcdef012", DivergenceCounts(), StatusCounts())
        assert line.startswith(f"[{_seg(BLACK, ':abcdef012')}|")

    def test_ends_with_single_newline(self, renderer: PromptRenderer) -> None:
        line = renderer.render("main", DivergenceCounts(), StatusCounts(staged=1))
        assert line.endswith("]\n")
        assert line.count("\n") == 1

    def test_zsh_markers(self) -> None:
        renderer = PromptRenderer(Config())

        line = renderer.render("main", DivergenceCounts(), StatusCounts(untracked=1))

        assert line == (
            "[%{\x1b[30;1m%}main%{\x1b[0m%}|%{\x1b[35;1m%}_1%{\x1b[0m%}]\n"
        )

    def test_bash_markers(self) -> None:
        renderer = PromptRenderer(Config(shell=Shell.BASH))

        line = renderer.render("main", DivergenceCounts(), StatusCounts())

        assert line == (
            "[\x01\x1b[30;1m\x02main\x01\x1b[0m\x02|"
            "\x01\x1b[32;1m\x02=\x01\x1b[0m\x02]\n"
        )

    def test_custom_tokens_and_symbols(self) -> None:
        config = Config.from_dict(
            {
                "shell": "none",
                "tokens": {"prefix": "(", "suffix": ")", "separator": " "},
                "symbols": {"ahead": "↑"},
                "colors": {"bold": False},
            }
        )

        line = PromptRenderer(config).render(
            "main", DivergenceCounts(ahead=1), StatusCounts()
        )

        assert line == "(\x1b[30mmain\x1b[0m\x1b[36m↑1\x1b[0m \x1b[32m=\x1b[0m)\n"

    def test_exposes_config(self, plain_config: Config) -> None:
        assert PromptRenderer(plain_config).config is plain_config
