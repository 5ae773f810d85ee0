"""Repository creation: ``git init`` and ``git clone``."""

from __future__ import annotations

from gitcore.constants import DEFAULT_BRANCH
from gitcore.models.options import CloneOptions, InitOptions
from gitcore.models.results import CloneResult, InitResult
from gitcore.operations.base import (
    GitInvocation,
    positional,
    require,
    validation_error,
)

__all__ = [
    "build_clone_args",
    "build_init_args",
    "execute_clone",
    "execute_init",
]


def build_init_args(options: InitOptions) -> list[str]:
    args = ["init"]
    if options.bare:
        args.append("--bare")
    if options.initial_branch:
        args.append(f"--initial-branch={options.initial_branch}")
    if options.path:
        args.append(positional(options.path, "path", "init"))
    return args


async def execute_init(invoke: GitInvocation, options: InitOptions) -> InitResult:
    await invoke(build_init_args(options))
    return InitResult(
        path=options.path or str(invoke.working_dir),
        initial_branch=options.initial_branch,
        bare=options.bare,
    )


def build_clone_args(options: CloneOptions) -> list[str]:
    """Encode clone flags, then ``--`` and the URL and destination."""
    require(options.remote_url, "remote_url", "clone")
    require(options.local_path, "local_path", "clone")
    if options.depth is not None and options.depth < 1:
        raise validation_error("depth must be a positive integer", "clone")

    args = ["clone"]
    if options.branch:
        args.extend(["--branch", options.branch])
    if options.depth is not None:
        args.extend(["--depth", str(options.depth)])
    if options.bare:
        args.append("--bare")
    if options.mirror:
        args.append("--mirror")
    if options.recurse_submodules:
        args.append("--recurse-submodules")
    args.extend(["--", options.remote_url, options.local_path])
    return args


async def execute_clone(invoke: GitInvocation, options: CloneOptions) -> CloneResult:
    await invoke(build_clone_args(options), network=True)
    return CloneResult(
        remote_url=options.remote_url,
        local_path=options.local_path,
        branch=options.branch or DEFAULT_BRANCH,
    )
