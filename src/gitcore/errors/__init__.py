"""Failure classification and the opt-in retry helper."""

from __future__ import annotations

from gitcore.errors.classifier import STDERR_RULES, classify_result
from gitcore.errors.retry import retry_classified

__all__ = ["STDERR_RULES", "classify_result", "retry_classified"]
