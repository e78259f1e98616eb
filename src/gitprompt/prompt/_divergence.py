"""Ahead/behind counting against the upstream branch."""

from typing import TYPE_CHECKING

from gitprompt.backend import BackendProtocol
from gitprompt.exceptions import BackendError, NoHeadError, NoUpstreamError
from gitprompt.prompt._models import DivergenceCounts

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


def count_divergence(
    backend: BackendProtocol,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> DivergenceCounts:
    """Count commits between local HEAD and its upstream.

    A branch without an upstream, a detached HEAD and an unborn branch all
    yield (0, 0). Any other backend failure is logged and also yields (0, 0).

    Args:
        backend: The repository backend.
        logger: Logger for degraded results.

    Returns:
        The ahead/behind counts.
    """
    try:
        local = backend.resolve_head()
        upstream = backend.resolve_upstream(local)
        ahead, behind = backend.ahead_behind(local.target, upstream.target)
    except (NoHeadError, NoUpstreamError) as e:
        if logger is not None:
            logger.debug("no upstream", reason=str(e))
        return DivergenceCounts()
    except BackendError as e:
        if logger is not None:
            logger.warning("divergence unavailable", error=str(e))
        return DivergenceCounts()

    return DivergenceCounts(ahead=ahead, behind=behind)
