"""Async runner for git subprocesses.

This module provides the GitRunner class for executing git with a working
directory, a controlled environment, an output cap and a timeout.
"""

from __future__ import annotations

import asyncio
import contextlib
import time
from pathlib import Path
from typing import TYPE_CHECKING

from gitcore.constants import (
    DEFAULT_LOCALE,
    DEFAULT_MAX_OUTPUT_BYTES,
    DEFAULT_TIMEOUT,
    TERMINATION_GRACE_PERIOD,
)
from gitcore.exceptions import ClassifiedError, ErrorCategory, ErrorDetails
from gitcore.logging import get_logger
from gitcore.runners.environment import build_git_env, git_config_args
from gitcore.runners.models import CommandResult
from gitcore.utils.security import scrub_args

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from gitcore.config import GitcoreConfig

__all__ = ["GitRunner"]

logger = get_logger(__name__)

# Bytes requested per read from a pipe
_READ_CHUNK_SIZE = 64 * 1024

# Trailing characters trimmed from captured output. The ASCII separators
# used by delimited formats count as whitespace for str.rstrip(), so they
# are left out of this set.
_TRAILING_WHITESPACE = " \t\r\n"


class GitRunner:
    """Execute git safely with timeout, output cap and environment control.

    Provides async execution with:
    - Argument lists only (no shell)
    - Timeout handling with graceful termination (SIGTERM + grace period + SIGKILL)
    - Per-stream output cap; exceeding it kills git
    - Deterministic environment (see :func:`build_git_env`)
    - Child cleanup on task cancellation

    The runner holds no per-call state, so one instance can serve any number
    of concurrent invocations.

    Example:
        ```python
        runner = GitRunner(timeout=30.0)
        result = await runner.run(["status", "--porcelain=v2"], cwd=Path("/repo"))
        if result.success:
            print(result.stdout)
        ```
    """

    def __init__(
        self,
        executable: str = "git",
        *,
        timeout: float | None = DEFAULT_TIMEOUT,
        max_output_bytes: int = DEFAULT_MAX_OUTPUT_BYTES,
        env: Mapping[str, str] | None = None,
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        """Initialize the GitRunner.

        Args:
            executable: Name or path of the git binary.
            timeout: Default timeout in seconds. Use None for no timeout.
            max_output_bytes: Maximum bytes accepted per output stream.
            env: Additional environment variables for every invocation.
            locale: Locale forced through LANG and LC_ALL.
        """
        self._executable = executable
        self._timeout = timeout
        self._max_output_bytes = max_output_bytes
        self._extra_env = dict(env or {})
        self._locale = locale

    @classmethod
    def from_config(cls, config: GitcoreConfig) -> GitRunner:
        """Create a runner from loaded settings."""
        return cls(
            config.git_executable,
            timeout=config.timeout_seconds,
            max_output_bytes=config.max_output_bytes,
            env=config.extra_env,
            locale=config.locale,
        )

    @property
    def executable(self) -> str:
        """Name or path of the git binary."""
        return self._executable

    @property
    def timeout(self) -> float | None:
        """Default timeout in seconds."""
        return self._timeout

    @property
    def max_output_bytes(self) -> int:
        """Per-stream output cap in bytes."""
        return self._max_output_bytes

    def _validate_cwd(self, cwd: Path, args: Sequence[str]) -> None:
        """Validate the working directory before spawning.

        Raises:
            ClassifiedError: Validation category, if the directory is not
                absolute or does not exist.
        """
        problem: str | None = None
        if not cwd.is_absolute():
            problem = f"Working directory must be an absolute path: {cwd}"
        elif not cwd.is_dir():
            problem = f"Working directory does not exist: {cwd}"
        if problem is not None:
            raise ClassifiedError(
                problem,
                category=ErrorCategory.VALIDATION,
                details=ErrorDetails(command=scrub_args([self._executable, *args])),
            )

    def build_env(self, extra_env: Mapping[str, str] | None = None) -> dict[str, str]:
        """Build the environment for one invocation."""
        overrides = {**self._extra_env, **(extra_env or {})}
        return build_git_env(overrides, locale=self._locale)

    async def run(
        self,
        args: Sequence[str],
        *,
        cwd: Path,
        timeout: float | None = None,
        env: Mapping[str, str] | None = None,
    ) -> CommandResult:
        """Execute git once and return the raw result.

        A non-zero exit is not an exception here; the caller classifies it.

        Args:
            args: Git arguments (subcommand first), without the executable.
            cwd: Working directory. Must exist.
            timeout: Override timeout. Use 0 or negative for no timeout.
            env: Additional environment variables for this invocation.

        Returns:
            CommandResult with returncode, stdout, stderr and limit flags.

        Raises:
            ClassifiedError: If *cwd* is not an existing absolute directory.
            asyncio.CancelledError: If the awaiting task is cancelled; git is
                killed and reaped first.
        """
        self._validate_cwd(cwd, args)

        effective_timeout = timeout if timeout is not None else self._timeout
        if effective_timeout is not None and effective_timeout <= 0:
            effective_timeout = None

        argv = [self._executable, *git_config_args(), *args]
        logger.debug(
            "git_command_started",
            argv=list(scrub_args(argv)),
            cwd=str(cwd),
        )
        result = await self._execute_once(
            argv, cwd, effective_timeout, self.build_env(env)
        )
        logger.debug(
            "git_command_finished",
            subcommand=args[0] if args else None,
            returncode=result.returncode,
            duration_ms=result.duration_ms,
            timed_out=result.timed_out,
            output_exceeded=result.output_exceeded,
        )
        return result

    async def _execute_once(
        self,
        argv: list[str],
        cwd: Path,
        timeout: float | None,
        env: dict[str, str],
    ) -> CommandResult:
        start_time = time.monotonic()

        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=cwd,
                env=env,
            )
        except FileNotFoundError:
            return CommandResult(
                returncode=127,
                stdout="",
                stderr=f"Command not found: {argv[0]}",
                duration_ms=_elapsed_ms(start_time),
            )
        except PermissionError:
            return CommandResult(
                returncode=126,
                stdout="",
                stderr=f"Permission denied: {argv[0]}",
                duration_ms=_elapsed_ms(start_time),
            )

        overflow: list[bool] = []
        try:
            stdout_bytes, stderr_bytes, _ = await asyncio.wait_for(
                asyncio.gather(
                    self._read_limited(process, process.stdout, overflow),
                    self._read_limited(process, process.stderr, overflow),
                    process.wait(),
                ),
                timeout=timeout,
            )
        except TimeoutError:
            await _terminate(process)
            return CommandResult(
                returncode=-1,
                stdout="",
                stderr=f"Command timed out after {timeout}s",
                duration_ms=_elapsed_ms(start_time),
                timed_out=True,
            )
        except asyncio.CancelledError:
            await _kill(process)
            logger.debug("git_command_cancelled", argv=list(scrub_args(argv)))
            raise

        return CommandResult(
            returncode=process.returncode if process.returncode is not None else 0,
            stdout=_decode(stdout_bytes),
            stderr=_decode(stderr_bytes),
            duration_ms=_elapsed_ms(start_time),
            output_exceeded=bool(overflow),
        )

    async def _read_limited(
        self,
        process: asyncio.subprocess.Process,
        stream: asyncio.StreamReader | None,
        overflow: list[bool],
    ) -> bytes:
        """Read a pipe to EOF, killing git once the output cap is exceeded."""
        if stream is None:
            return b""
        chunks: list[bytes] = []
        size = 0
        while True:
            chunk = await stream.read(_READ_CHUNK_SIZE)
            if not chunk:
                break
            size += len(chunk)
            if size > self._max_output_bytes:
                overflow.append(True)
                with contextlib.suppress(ProcessLookupError):
                    process.kill()
                break
            chunks.append(chunk)
        return b"".join(chunks)


def _elapsed_ms(start_time: float) -> int:
    return int((time.monotonic() - start_time) * 1000)


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace").rstrip(_TRAILING_WHITESPACE)


async def _terminate(process: asyncio.subprocess.Process) -> None:
    """SIGTERM, wait for the grace period, then SIGKILL."""
    if process.returncode is not None:
        return
    with contextlib.suppress(ProcessLookupError):
        process.terminate()
    try:
        await asyncio.wait_for(process.wait(), timeout=TERMINATION_GRACE_PERIOD)
    except TimeoutError:
        await _kill(process)


async def _kill(process: asyncio.subprocess.Process) -> None:
    if process.returncode is not None:
        return
    with contextlib.suppress(ProcessLookupError):
        process.kill()
    await process.wait()
