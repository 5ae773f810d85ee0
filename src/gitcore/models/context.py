"""Per-call execution context."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

__all__ = ["ExecutionContext"]


@dataclass(frozen=True, slots=True)
class ExecutionContext:
    """Where and on whose behalf an operation runs.

    Immutable and never shared between calls. The runner rejects a working
    directory that is relative or missing before spawning git.

    Attributes:
        working_dir: Absolute path of the repository (or, for clone and
            init, the directory the command runs in).
        request_id: Logical request identifier, bound into log context.
        tenant_id: Tenant identifier, bound into log context.
    """

    working_dir: Path
    request_id: str = ""
    tenant_id: str = ""

    def log_fields(self) -> dict[str, str]:
        """Fields bound into the structlog context for this call."""
        fields = {"working_dir": str(self.working_dir)}
        if self.request_id:
            fields["request_id"] = self.request_id
        if self.tenant_id:
            fields["tenant_id"] = self.tenant_id
        return fields
