"""gitcore: typed, async git operations over the git executable.

Example:
    ```python
    from pathlib import Path

    from gitcore import ExecutionContext, GitClient
    from gitcore.models import StatusOptions

    client = GitClient()
    status = await client.status(
        StatusOptions(), ExecutionContext(working_dir=Path("/srv/repo"))
    )
    ```
"""

from __future__ import annotations

from gitcore.client import GitClient
from gitcore.config import GitcoreConfig, load_config
from gitcore.errors import classify_result, retry_classified
from gitcore.exceptions import (
    ClassifiedError,
    ConfigError,
    ErrorCategory,
    ErrorDetails,
    ErrorSeverity,
    GitcoreError,
)
from gitcore.models.context import ExecutionContext
from gitcore.operations import OperationKind
from gitcore.runners import CommandResult, GitRunner

__version__ = "0.1.0"

__all__ = [
    "ClassifiedError",
    "CommandResult",
    "ConfigError",
    "ErrorCategory",
    "ErrorDetails",
    "ErrorSeverity",
    "ExecutionContext",
    "GitClient",
    "GitRunner",
    "GitcoreConfig",
    "GitcoreError",
    "OperationKind",
    "classify_result",
    "load_config",
    "retry_classified",
]
