from __future__ import annotations


class GitcoreError(Exception):
    """Base exception class for all gitcore errors.

    This is the root of the gitcore exception hierarchy. Callers can catch
    ``GitcoreError`` at their boundary to handle every failure raised by the
    execution layer while letting unrelated exceptions propagate.

    Attributes:
        message: Human-readable error message describing what went wrong.

    Example:
        ```python
        try:
            await client.status(StatusOptions(), context)
        except GitcoreError as e:
            logger.error("git_failed", error=e.message)
        ```
    """

    def __init__(self, message: str) -> None:
        """Initialize the GitcoreError.

        Args:
            message: Human-readable error message.
        """
        self.message = message
        super().__init__(message)
