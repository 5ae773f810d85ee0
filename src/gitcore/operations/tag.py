"""``git tag`` listing, creation and deletion."""

from __future__ import annotations

from dataclasses import replace

from gitcore.exceptions import ClassifiedError
from gitcore.logging import get_logger
from gitcore.models.options import TagOptions
from gitcore.models.results import TagResult
from gitcore.operations.base import (
    GitInvocation,
    positional,
    require,
    validation_error,
)
from gitcore.parsers.listings import parse_tags

__all__ = ["build_tag_args", "execute_tag"]

logger = get_logger(__name__)

_SIGNING_FAILURE_MARKERS = ("gpg", "signing", "sign the")


def _default_message(tag_name: str) -> str:
    return f"Tag {tag_name}"


def build_tag_args(options: TagOptions) -> list[str]:
    """Encode ``git tag`` for ``options.mode``.

    Signed tags use ``-s -m``; annotated tags (or any tag given a message)
    use ``-a -m``. The message is always a single token.
    """
    mode = options.mode
    if mode == "list":
        return ["tag", "-l"]

    name = positional(
        require(options.tag_name, "tag_name", f"tag {mode}"), "tag_name", f"tag {mode}"
    )
    if mode == "delete":
        return ["tag", "-d", name]
    if mode != "create":
        raise validation_error(f"Unknown tag mode: {mode}", "tag")

    args = ["tag"]
    if options.sign:
        args.extend(["-s", "-m", options.message or _default_message(name)])
    elif options.annotated or options.message:
        args.extend(["-a", "-m", options.message or _default_message(name)])
    if options.force:
        args.append("--force")
    args.append(name)
    if options.commit:
        args.append(positional(options.commit, "commit", "tag create"))
    return args


def _is_signing_failure(error: ClassifiedError) -> bool:
    stderr = error.details.stderr.lower()
    return any(marker in stderr for marker in _SIGNING_FAILURE_MARKERS)


async def execute_tag(invoke: GitInvocation, options: TagOptions) -> TagResult:
    """Run a tag command.

    When a signed tag fails because signing failed and
    ``force_unsigned_on_failure`` is set, the tag is created again as an
    unsigned annotated tag and the result reports ``signed=False``.
    """
    mode = options.mode
    if mode == "list":
        result = await invoke(build_tag_args(options))
        return TagResult(mode=mode, tags=tuple(parse_tags(result.stdout)))
    if mode == "delete":
        await invoke(build_tag_args(options))
        return TagResult(mode=mode, deleted=options.tag_name)

    try:
        await invoke(build_tag_args(options))
    except ClassifiedError as error:
        if not (options.sign and options.force_unsigned_on_failure):
            raise
        if not _is_signing_failure(error):
            raise
        logger.warning(
            "git_tag_signing_failed",
            tag_name=options.tag_name,
            error=error.message,
        )
        unsigned = replace(options, sign=False, annotated=True)
        await invoke(build_tag_args(unsigned))
        return TagResult(mode=mode, created=options.tag_name, signed=False)
    return TagResult(mode=mode, created=options.tag_name, signed=options.sign)
