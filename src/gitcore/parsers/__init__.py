"""Pure parsers from git's text output to typed results.

Every parser accepts empty input and returns an empty collection (or a clean
result) rather than raising.
"""

from __future__ import annotations

from gitcore.parsers.blame import parse_blame
from gitcore.parsers.conflicts import CONFLICT_MARKER, has_conflicts, parse_conflicts
from gitcore.parsers.listings import (
    BRANCH_FORMAT,
    parse_branches,
    parse_remotes,
    parse_stashes,
    parse_tags,
)
from gitcore.parsers.log import (
    COMMIT_METADATA_FORMAT,
    LOG_FORMAT,
    detect_object_type,
    parse_commit_metadata,
    parse_log,
    parse_show,
)
from gitcore.parsers.reflog import REFLOG_FORMAT, parse_reflog
from gitcore.parsers.status import parse_status
from gitcore.parsers.transfer import (
    detect_pull_strategy,
    has_push_rejections,
    parse_fetch_refs,
    parse_push_refs,
)
from gitcore.parsers.working_tree import (
    NumstatSummary,
    parse_checkout_files,
    parse_clean,
    parse_merge_stat_files,
    parse_numstat,
    parse_rebased_count,
)
from gitcore.parsers.worktree import parse_pruned_worktrees, parse_worktrees

__all__ = [
    "BRANCH_FORMAT",
    "COMMIT_METADATA_FORMAT",
    "CONFLICT_MARKER",
    "LOG_FORMAT",
    "NumstatSummary",
    "REFLOG_FORMAT",
    "detect_object_type",
    "detect_pull_strategy",
    "has_conflicts",
    "has_push_rejections",
    "parse_blame",
    "parse_branches",
    "parse_checkout_files",
    "parse_clean",
    "parse_commit_metadata",
    "parse_conflicts",
    "parse_fetch_refs",
    "parse_log",
    "parse_merge_stat_files",
    "parse_numstat",
    "parse_pruned_worktrees",
    "parse_push_refs",
    "parse_rebased_count",
    "parse_reflog",
    "parse_remotes",
    "parse_show",
    "parse_stashes",
    "parse_status",
    "parse_tags",
    "parse_worktrees",
]
