from __future__ import annotations

from .messages import ErrorCase, generate_error_cases

__all__ = ["ErrorCase", "generate_error_cases"]
