"""Utility helpers shared across gitcore."""

from __future__ import annotations

from gitcore.utils.security import scrub_args, scrub_secrets

__all__ = ["scrub_args", "scrub_secrets"]
