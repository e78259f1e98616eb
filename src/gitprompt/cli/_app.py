"""The command-line interface for gitprompt."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

import sys
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

from cyclopts import App, Parameter

from gitprompt import __version__
from gitprompt.backend import open_backend
from gitprompt.config import Config, Shell, safe_load_config
from gitprompt.exceptions import GitPromptError, RepositoryUnavailableError
from gitprompt.prompt import PromptRenderer, build_prompt
from gitprompt.utils import create_logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

app = App(
    name="gitprompt",
    help="Print a one-line git status summary for a shell prompt.",
    version=__version__,
    help_on_error=True,
)


def run_prompt(
    config: Config,
    logger: "FilteringBoundLogger",  # noqa: UP037
    working_dir: Path | None = None,
) -> str:
    """Build the prompt for the repository containing a directory.

    Args:
        config: Loaded configuration.
        logger: Logger for failures and degraded results.
        working_dir: Directory to inspect. If None, uses the current directory.

    Returns:
        The prompt line, or an empty string when there is nothing to show.
    """
    try:
        with open_backend(
            working_dir, include_ignored=config.status.include_ignored
        ) as backend:
            return build_prompt(backend, PromptRenderer(config), logger)
    except RepositoryUnavailableError as e:
        logger.debug("no repository", path=str(e.path))
    except GitPromptError as e:
        logger.warning("prompt unavailable", error=str(e), error_type=type(e).__name__)
    return ""


@app.default
def prompt(
    *,
    shell: Annotated[
        Shell | None,
        Parameter(name="--shell", help="Zero-width escape style for color codes"),
    ] = None,
    config: Annotated[
        Path | None, Parameter(name="--config", help="Path to config file")
    ] = None,
) -> None:
    """Print the git status prompt for the current directory.

    Args:
        shell: Override the configured shell escape style.
        config: Explicit path to config file.
    """
    cli_overrides: dict[str, object] | None = None
    if shell is not None:
        cli_overrides = {"shell": shell.value}

    loaded_config, config_error = safe_load_config(
        config_path=config,
        cli_overrides=cli_overrides,
    )

    logger = create_logger(
        level=loaded_config.logging.level.value,
        log_format=loaded_config.logging.format.value,  # type: ignore[arg-type]
        log_file=loaded_config.logging.file,
    )
    if config_error is not None:
        logger.warning("config fallback", error=config_error)

    line = run_prompt(loaded_config, logger)
    if line:
        sys.stdout.write(line)
        sys.stdout.flush()


def main() -> None:
    """Default entrypoint for the `gitprompt` CLI."""
    app()


if __name__ == "__main__":
    main()
