"""Data models for git process execution."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["CommandResult"]


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Raw result of a single git invocation.

    Attributes:
        returncode: Exit code (0 = success). 127 when the executable was not
            found, 126 when it could not be executed, -1 after a timeout and
            negative when git was killed by a signal.
        stdout: Standard output, trailing whitespace removed.
        stderr: Standard error, trailing whitespace removed.
        duration_ms: Execution time in milliseconds.
        timed_out: True if the invocation exceeded its timeout.
        output_exceeded: True if either stream exceeded the output cap.
    """

    returncode: int
    stdout: str
    stderr: str
    duration_ms: int = 0
    timed_out: bool = False
    output_exceeded: bool = False

    @property
    def success(self) -> bool:
        """True if git exited 0 within its time and output limits."""
        return (
            self.returncode == 0 and not self.timed_out and not self.output_exceeded
        )

    @property
    def output(self) -> str:
        """Combined stdout and stderr for convenience."""
        if self.stderr:
            return f"{self.stdout}\n{self.stderr}" if self.stdout else self.stderr
        return self.stdout
