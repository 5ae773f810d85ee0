"""gitcore constants shared by the runner, encoders and parsers."""

from __future__ import annotations

# =============================================================================
# Process limits
# =============================================================================

#: Default timeout for local git operations (seconds).
DEFAULT_TIMEOUT: float = 120.0

#: Timeout for clone / fetch / pull / push (seconds).
DEFAULT_NETWORK_TIMEOUT: float = 600.0

#: Per-stream output cap (bytes). Exceeding it kills the process.
DEFAULT_MAX_OUTPUT_BYTES: int = 10 * 1024 * 1024

#: Seconds between SIGTERM and SIGKILL when stopping git.
TERMINATION_GRACE_PERIOD: float = 2.0

# =============================================================================
# Environment
# =============================================================================

#: Locale forced onto every invocation so stderr matching is stable.
DEFAULT_LOCALE: str = "en_US.UTF-8"

# =============================================================================
# Delimiters
# =============================================================================

#: ASCII unit separator, emitted by ``%x1f`` in pretty formats and ``%1f`` in
#: ref formats.
FIELD_SEPARATOR = "\x1f"

#: ASCII record separator, emitted by ``%x1e`` in git format strings.
RECORD_SEPARATOR = "\x1e"

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_REMOTE: str = "origin"
DEFAULT_BRANCH: str = "main"
DEFAULT_STASH_REF: str = "stash@{0}"
DEFAULT_MERGE_STRATEGY: str = "ort"
