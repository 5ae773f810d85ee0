"""``git checkout`` for branches, commits and paths."""

from __future__ import annotations

from gitcore.models.options import CheckoutOptions
from gitcore.models.results import CheckoutResult
from gitcore.operations.base import GitInvocation, positional, require
from gitcore.parsers.working_tree import parse_checkout_files

__all__ = ["build_checkout_args", "execute_checkout"]


def build_checkout_args(options: CheckoutOptions) -> list[str]:
    target = positional(
        require(options.target, "target", "checkout"), "target", "checkout"
    )
    args = ["checkout"]
    if options.create_branch:
        args.append("-b")
    args.append(target)
    if options.track:
        args.append("--track")
    if options.force:
        args.append("--force")
    if options.paths:
        args.extend(["--", *options.paths])
    return args


async def execute_checkout(
    invoke: GitInvocation, options: CheckoutOptions
) -> CheckoutResult:
    result = await invoke(build_checkout_args(options))
    return CheckoutResult(
        target=options.target,
        branch_created=options.create_branch,
        files_modified=tuple(parse_checkout_files(result.stdout)),
    )
