"""Prompt core.

Turns what the backend reports into the prompt line: classify file
statuses, count divergence from the upstream, resolve the branch label and
render the result.

Example:
    >>> from gitprompt.backend import open_backend
    >>> from gitprompt.config import Config
    >>> with open_backend() as backend:
    ...     line = build_prompt(backend, PromptRenderer(Config()))
"""

from gitprompt.prompt._branch import (
    DEFAULT_ABBREV,
    DETACHED_MARKER,
    HEAD_STRATEGIES,
    abbreviation_length,
    label_for_reference,
    resolve_branch_label,
    resolve_head_reference,
)
from gitprompt.prompt._build import build_prompt, collect_status
from gitprompt.prompt._classifier import (
    CLASSIFICATION_RULES,
    Bucket,
    ClassificationRule,
    classify_flags,
    classify_status,
)
from gitprompt.prompt._divergence import count_divergence
from gitprompt.prompt._escapes import ZERO_WIDTH_MARKERS, Palette, Segment, sgr
from gitprompt.prompt._models import DivergenceCounts, StatusCounts
from gitprompt.prompt._renderer import STATUS_SEGMENTS, PromptRenderer

__all__ = [
    "CLASSIFICATION_RULES",
    "DEFAULT_ABBREV",
    "DETACHED_MARKER",
    "HEAD_STRATEGIES",
    "STATUS_SEGMENTS",
    "ZERO_WIDTH_MARKERS",
    "Bucket",
    "ClassificationRule",
    "DivergenceCounts",
    "Palette",
    "PromptRenderer",
    "Segment",
    "StatusCounts",
    "abbreviation_length",
    "build_prompt",
    "classify_flags",
    "classify_status",
    "collect_status",
    "count_divergence",
    "label_for_reference",
    "resolve_branch_label",
    "resolve_head_reference",
    "sgr",
]
