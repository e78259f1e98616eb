"""Compose the prompt from a repository backend."""

from typing import TYPE_CHECKING

from gitprompt.backend import BackendProtocol
from gitprompt.exceptions import BackendError
from gitprompt.prompt._branch import resolve_branch_label
from gitprompt.prompt._classifier import classify_status
from gitprompt.prompt._divergence import count_divergence
from gitprompt.prompt._models import StatusCounts
from gitprompt.prompt._renderer import PromptRenderer

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


def collect_status(
    backend: BackendProtocol,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> StatusCounts:
    """Classify the backend's status entries.

    Failures while enumerating are logged and yield all-zero counts.
    """
    try:
        return classify_status(backend.status_entries())
    except BackendError as e:
        if logger is not None:
            logger.warning("status unavailable", error=str(e))
        return StatusCounts()


def build_prompt(
    backend: BackendProtocol,
    renderer: PromptRenderer,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> str:
    """Build the prompt line for a repository.

    Status and divergence are best-effort. The branch label is resolved
    last but before anything is rendered, so a failure leaves no partial
    output.

    Args:
        backend: The repository backend.
        renderer: Renderer holding the prompt configuration.
        logger: Logger for degraded results.

    Returns:
        The rendered prompt line, newline included.

    Raises:
        ReferenceUnavailableError: If HEAD cannot be resolved.
        EmptyLabelError: If the branch label is empty.
    """
    counts = collect_status(backend, logger)
    divergence = count_divergence(backend, logger)
    label = resolve_branch_label(backend)

    if logger is not None:
        logger.debug(
            "prompt resolved",
            label=label,
            ahead=divergence.ahead,
            behind=divergence.behind,
            staged=counts.staged,
            conflicts=counts.conflicts,
            changed=counts.changed,
            untracked=counts.untracked,
        )
    return renderer.render(label, divergence, counts)
