"""Typed inputs and outputs of gitcore operations."""

from __future__ import annotations

from gitcore.models.context import ExecutionContext
from gitcore.models.options import (
    AddOptions,
    BlameOptions,
    BranchOptions,
    CheckoutOptions,
    CherryPickOptions,
    CleanOptions,
    CloneOptions,
    CommitAuthor,
    CommitOptions,
    DiffOptions,
    FetchOptions,
    InitOptions,
    LogOptions,
    MergeOptions,
    PullOptions,
    PushOptions,
    RebaseOptions,
    ReflogOptions,
    RemoteOptions,
    ResetOptions,
    ShowOptions,
    StashOptions,
    StatusOptions,
    TagOptions,
    WorktreeOptions,
)
from gitcore.models.results import (
    AddResult,
    BlameLine,
    BlameResult,
    BranchInfo,
    BranchResult,
    CheckoutResult,
    CherryPickResult,
    CleanResult,
    CloneResult,
    CommitInfo,
    CommitResult,
    DiffResult,
    FetchResult,
    InitResult,
    LogResult,
    MergeConflict,
    MergeResult,
    PullResult,
    PushResult,
    RebaseResult,
    ReflogEntry,
    ReflogResult,
    RemoteInfo,
    RemoteResult,
    RenamePair,
    ResetResult,
    ShowResult,
    StagedChanges,
    StashEntry,
    StashResult,
    StatusResult,
    TagInfo,
    TagResult,
    UnstagedChanges,
    WorktreeInfo,
    WorktreeResult,
)

__all__ = [
    # Context
    "ExecutionContext",
    # Options
    "AddOptions",
    "BlameOptions",
    "BranchOptions",
    "CheckoutOptions",
    "CherryPickOptions",
    "CleanOptions",
    "CloneOptions",
    "CommitAuthor",
    "CommitOptions",
    "DiffOptions",
    "FetchOptions",
    "InitOptions",
    "LogOptions",
    "MergeOptions",
    "PullOptions",
    "PushOptions",
    "RebaseOptions",
    "ReflogOptions",
    "RemoteOptions",
    "ResetOptions",
    "ShowOptions",
    "StashOptions",
    "StatusOptions",
    "TagOptions",
    "WorktreeOptions",
    # Results
    "AddResult",
    "BlameLine",
    "BlameResult",
    "BranchInfo",
    "BranchResult",
    "CheckoutResult",
    "CherryPickResult",
    "CleanResult",
    "CloneResult",
    "CommitInfo",
    "CommitResult",
    "DiffResult",
    "FetchResult",
    "InitResult",
    "LogResult",
    "MergeConflict",
    "MergeResult",
    "PullResult",
    "PushResult",
    "RebaseResult",
    "ReflogEntry",
    "ReflogResult",
    "RemoteInfo",
    "RemoteResult",
    "RenamePair",
    "ResetResult",
    "ShowResult",
    "StagedChanges",
    "StashEntry",
    "StashResult",
    "StatusResult",
    "TagInfo",
    "TagResult",
    "UnstagedChanges",
    "WorktreeInfo",
    "WorktreeResult",
]
