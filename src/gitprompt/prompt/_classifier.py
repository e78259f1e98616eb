"""Status classification.

Each status record falls into at most one rule. Rules are tried in order and
the first whose mask intersects the record's flags decides the buckets it
counts towards.
"""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final, Literal

from gitprompt.backend import (
    INDEX_FLAGS,
    WORKTREE_CHANGE_FLAGS,
    StatusFlag,
    StatusFlagRecord,
)
from gitprompt.prompt._models import StatusCounts

type Bucket = Literal["untracked", "conflicts", "changed", "staged"]


@dataclass(frozen=True, slots=True)
class ClassificationRule:
    """Buckets that records matching a flag mask count towards.

    Attributes:
        mask: The rule matches when any of these bits is set.
        buckets: Buckets incremented for a match; empty means the record
            is skipped.
    """

    mask: StatusFlag
    buckets: tuple[Bucket, ...]


CLASSIFICATION_RULES: Final[tuple[ClassificationRule, ...]] = (
    ClassificationRule(StatusFlag.IGNORED, ()),
    ClassificationRule(INDEX_FLAGS, ("staged",)),
    ClassificationRule(StatusFlag.CONFLICTED, ("conflicts", "changed")),
    ClassificationRule(WORKTREE_CHANGE_FLAGS, ("changed",)),
    ClassificationRule(StatusFlag.WT_NEW, ("untracked",)),
)


def classify_flags(flags: StatusFlag) -> tuple[Bucket, ...]:
    """Return the buckets a single record counts towards.

    Args:
        flags: The record's status bits.

    Returns:
        Buckets from the first matching rule, or an empty tuple when no
        rule matches.

    Examples:
        >>> classify_flags(StatusFlag.INDEX_NEW | StatusFlag.WT_MODIFIED)
        ('staged',)
        >>> classify_flags(StatusFlag.CONFLICTED)
        ('conflicts', 'changed')
    """
    for rule in CLASSIFICATION_RULES:
        if flags & rule.mask:
            return rule.buckets
    return ()


def classify_status(records: Iterable[StatusFlagRecord]) -> StatusCounts:
    """Count status records per bucket.

    Args:
        records: Status records in any order.

    Returns:
        The aggregate counts.
    """
    tally: Counter[Bucket] = Counter()
    for record in records:
        tally.update(classify_flags(record.flags))

    return StatusCounts(
        untracked=tally["untracked"],
        conflicts=tally["conflicts"],
        changed=tally["changed"],
        staged=tally["staged"],
    )
