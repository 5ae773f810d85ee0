"""Index and working tree maintenance: add, reset and clean."""

from __future__ import annotations

from gitcore.models.options import AddOptions, CleanOptions, ResetOptions
from gitcore.models.results import AddResult, CleanResult, ResetResult
from gitcore.operations.base import GitInvocation, positional, validation_error
from gitcore.parsers.working_tree import parse_clean

__all__ = [
    "build_add_args",
    "build_clean_args",
    "build_reset_args",
    "execute_add",
    "execute_clean",
    "execute_reset",
]

_STAGED_NAMES_ARGS = ["diff", "--cached", "--name-only"]
_HEAD_ARGS = ["rev-parse", "HEAD"]


# =============================================================================
# add
# =============================================================================


def build_add_args(options: AddOptions) -> list[str]:
    """Encode ``git add``. ``--all`` replaces both ``--update`` and paths."""
    args = ["add"]
    if options.all_changes:
        args.append("--all")
    elif options.update:
        args.append("--update")
    if options.force:
        args.append("--force")
    if options.paths and not options.all_changes:
        args.extend(["--", *options.paths])
    return args


async def execute_add(invoke: GitInvocation, options: AddOptions) -> AddResult:
    if not options.paths and not options.all_changes and not options.update:
        return AddResult(staged_files=())

    await invoke(build_add_args(options))
    if options.all_changes or options.update:
        staged = await invoke(_STAGED_NAMES_ARGS)
        files = tuple(line for line in staged.stdout.splitlines() if line.strip())
        return AddResult(staged_files=files)
    return AddResult(staged_files=tuple(options.paths))


# =============================================================================
# reset
# =============================================================================


def build_reset_args(options: ResetOptions) -> list[str]:
    args = ["reset", f"--{options.mode}"]
    if options.commit:
        args.append(positional(options.commit, "commit", "reset"))
    if options.paths:
        args.extend(["--", *options.paths])
    return args


async def execute_reset(invoke: GitInvocation, options: ResetOptions) -> ResetResult:
    await invoke(build_reset_args(options))
    head = await invoke(_HEAD_ARGS)
    return ResetResult(
        mode=options.mode,
        commit=head.stdout.strip(),
        files_reset=tuple(options.paths),
    )


# =============================================================================
# clean
# =============================================================================


def build_clean_args(options: CleanOptions) -> list[str]:
    """Encode ``git clean``; ``-n`` wins over ``-f``.

    Raises:
        ClassifiedError: Validation category, when neither ``force`` nor
            ``dry_run`` is set.
    """
    if not options.force and not options.dry_run:
        raise validation_error("clean requires force or dry_run", "clean")
    args = ["clean", "-n" if options.dry_run else "-f"]
    if options.directories:
        args.append("-d")
    if options.ignored:
        args.append("-x")
    return args


async def execute_clean(invoke: GitInvocation, options: CleanOptions) -> CleanResult:
    result = await invoke(build_clean_args(options))
    files, directories = parse_clean(result.stdout)
    return CleanResult(
        files_removed=tuple(files),
        directories_removed=tuple(directories),
        dry_run=options.dry_run,
    )
