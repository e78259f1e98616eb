"""Branch label resolution."""

from collections.abc import Callable
from typing import Final

from gitprompt.backend import BackendProtocol, Reference
from gitprompt.exceptions import (
    BackendError,
    EmptyLabelError,
    ReferenceUnavailableError,
)
from gitprompt.utils import strip_refs_heads

DEFAULT_ABBREV: Final = 7
DETACHED_MARKER: Final = ":"
MAX_LABEL_LENGTH: Final = 256

# git rejects core.abbrev outside this range
_ABBREV_RANGE: Final = range(4, 41)

type HeadStrategy = Callable[[BackendProtocol], Reference]


def _lookup_head(backend: BackendProtocol) -> Reference:
    return backend.resolve_reference("HEAD")


def _repository_head(backend: BackendProtocol) -> Reference:
    return backend.resolve_head()


HEAD_STRATEGIES: Final[tuple[HeadStrategy, ...]] = (_lookup_head, _repository_head)


def resolve_head_reference(backend: BackendProtocol) -> Reference:
    """Resolve HEAD, trying each strategy in turn.

    Args:
        backend: The repository backend.

    Returns:
        The first reference a strategy produces.

    Raises:
        ReferenceUnavailableError: If every strategy fails.
    """
    errors: list[BackendError] = []
    for strategy in HEAD_STRATEGIES:
        try:
            return strategy(backend)
        except BackendError as e:
            errors.append(e)

    msg = "HEAD cannot be resolved: " + "; ".join(str(e) for e in errors)
    raise ReferenceUnavailableError(msg, name="HEAD") from errors[-1]


def abbreviation_length(backend: BackendProtocol) -> int:
    """Read ``core.abbrev``, falling back to 7 when unset or invalid."""
    try:
        length = backend.read_config_int("core.abbrev")
    except BackendError:
        return DEFAULT_ABBREV
    if length not in _ABBREV_RANGE:
        return DEFAULT_ABBREV
    return length


def label_for_reference(reference: Reference, abbrev: int = DEFAULT_ABBREV) -> str:
    """Turn a HEAD reference into a display label.

    A direct reference (detached HEAD) becomes ``:`` plus the first
    ``abbrev + 1`` characters of the object id. A symbolic reference becomes
    the branch name: ``refs/heads/`` is stripped, and targets outside that
    namespace keep only their last path component.

    Args:
        reference: The resolved HEAD reference.
        abbrev: Configured abbreviation length for object ids.

    Returns:
        The label, truncated to 256 characters. May be empty.
    """
    if reference.is_direct:
        label = DETACHED_MARKER + reference.target[: abbrev + 1]
    elif reference.target.startswith("refs/heads/"):
        label = strip_refs_heads(reference.target) or ""
    else:
        label = reference.target.rpartition("/")[2]
    return label[:MAX_LABEL_LENGTH]


def resolve_branch_label(backend: BackendProtocol) -> str:
    """Resolve the label shown for the current checkout.

    Args:
        backend: The repository backend.

    Returns:
        A non-empty branch label.

    Raises:
        ReferenceUnavailableError: If HEAD cannot be resolved.
        EmptyLabelError: If the resolved label is empty.
    """
    reference = resolve_head_reference(backend)
    abbrev = abbreviation_length(backend) if reference.is_direct else DEFAULT_ABBREV
    label = label_for_reference(reference, abbrev)
    if not label:
        msg = f"Reference {reference.name} resolved to an empty label"
        raise EmptyLabelError(msg)
    return label
