"""Remote configuration: ``git remote``."""

from __future__ import annotations

from gitcore.models.options import RemoteOptions
from gitcore.models.results import RemoteInfo, RemoteResult, RenamePair
from gitcore.operations.base import (
    GitInvocation,
    positional,
    require,
    validation_error,
)
from gitcore.parsers.listings import parse_remotes

__all__ = ["build_remote_args", "execute_remote"]


def build_remote_args(options: RemoteOptions) -> list[str]:
    mode = options.mode
    if mode == "list":
        return ["remote", "-v"]

    operation = f"remote {mode}"
    name = positional(require(options.name, "name", operation), "name", operation)
    if mode == "add":
        url = require(options.url, "url", operation)
        return ["remote", "add", name, positional(url, "url", operation)]
    if mode == "remove":
        return ["remote", "remove", name]
    if mode == "rename":
        new_name = require(options.new_name, "new_name", operation)
        positional(new_name, "new_name", operation)
        return ["remote", "rename", name, new_name]
    if mode == "get-url":
        return ["remote", "get-url", *(["--push"] if options.push else []), name]
    if mode == "set-url":
        url = positional(require(options.url, "url", operation), "url", operation)
        return ["remote", "set-url", *(["--push"] if options.push else []), name, url]
    raise validation_error(f"Unknown remote mode: {mode}", "remote")


async def execute_remote(invoke: GitInvocation, options: RemoteOptions) -> RemoteResult:
    result = await invoke(build_remote_args(options))
    mode = options.mode
    if mode == "list":
        return RemoteResult(mode=mode, remotes=tuple(parse_remotes(result.stdout)))
    if mode == "add":
        url = options.url or ""
        return RemoteResult(
            mode=mode,
            added=RemoteInfo(name=options.name or "", fetch_url=url, push_url=url),
        )
    if mode == "remove":
        return RemoteResult(mode=mode, removed=options.name)
    if mode == "rename":
        return RemoteResult(
            mode=mode,
            renamed=RenamePair(old=options.name or "", new=options.new_name or ""),
        )
    if mode == "get-url":
        return RemoteResult(mode=mode, url=result.stdout.strip())
    return RemoteResult(mode=mode, url=options.url)
