"""Unit tests for status classification."""

import pytest

from gitprompt.backend import StatusFlag, StatusFlagRecord
from gitprompt.prompt import StatusCounts, classify_flags, classify_status

S = StatusFlag


class TestClassifyFlags:
    @pytest.mark.parametrize(
        ("flags", "expected"),
        [
            (S.INDEX_NEW, ("staged",)),
            (S.INDEX_MODIFIED, ("staged",)),
            (S.INDEX_DELETED, ("staged",)),
            (S.INDEX_RENAMED, ("staged",)),
            (S.INDEX_TYPECHANGE, ("staged",)),
            (S.WT_MODIFIED, ("changed",)),
            (S.WT_DELETED, ("changed",)),
            (S.WT_RENAMED, ("changed",)),
            (S.WT_TYPECHANGE, ("changed",)),
            (S.WT_NEW, ("untracked",)),
            (S.CONFLICTED, ("conflicts", "changed")),
        ],
    )
    def test_single_flag(self, flags: StatusFlag, expected: tuple[str, ...]) -> None:
        assert classify_flags(flags) == expected

    def test_ignored_wins_over_everything(self) -> None:
        assert classify_flags(S.IGNORED | S.INDEX_NEW | S.WT_NEW) == ()

    def test_staged_wins_over_worktree_change(self) -> None:
        assert classify_flags(S.INDEX_MODIFIED | S.WT_MODIFIED) == ("staged",)

    def test_staged_wins_over_conflict(self) -> None:
        assert classify_flags(S.INDEX_NEW | S.CONFLICTED) == ("staged",)

    def test_conflict_wins_over_worktree_change(self) -> None:
        assert classify_flags(S.CONFLICTED | S.WT_MODIFIED) == ("conflicts", "changed")

    def test_worktree_change_wins_over_new(self) -> None:
        assert classify_flags(S.WT_MODIFIED | S.WT_NEW) == ("changed",)

    def test_current_matches_nothing(self) -> None:
        assert classify_flags(S.CURRENT) == ()


class TestClassifyStatus:
    def test_empty_is_clean(self) -> None:
        counts = classify_status([])

        assert counts == StatusCounts()
        assert counts.is_clean is True

    def test_counts_each_bucket(self) -> None:
        records = [
            StatusFlagRecord("a", S.INDEX_NEW),
            StatusFlagRecord("b", S.INDEX_MODIFIED | S.WT_MODIFIED),
            StatusFlagRecord("c", S.WT_MODIFIED),
            StatusFlagRecord("d", S.WT_NEW),
            StatusFlagRecord("e", S.WT_NEW),
            StatusFlagRecord("f", S.CONFLICTED),
            StatusFlagRecord("g", S.IGNORED),
        ]

        counts = classify_status(records)

        assert counts == StatusCounts(untracked=2, conflicts=1, changed=2, staged=2)

    def test_conflicted_file_counts_twice(self) -> None:
        counts = classify_status([StatusFlagRecord("x", S.CONFLICTED)])

        assert counts.conflicts == 1
        assert counts.changed == 1
        assert counts.total == 2

    def test_only_ignored_is_clean(self) -> None:
        counts = classify_status([StatusFlagRecord("x.log", S.IGNORED)])
        assert counts.is_clean is True

    def test_accepts_generator(self) -> None:
        records = (StatusFlagRecord(str(i), S.WT_NEW) for i in range(3))
        assert classify_status(records).untracked == 3
