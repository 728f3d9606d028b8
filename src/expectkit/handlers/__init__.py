"""Type guards and failure handlers shared by matchers."""

from .matchers import (
    InfoBuilder,
    ensure_not_nullish,
    ensure_type,
    handle_comparison_failure,
    handle_diff_failure,
    handle_failure,
)
from .mock import call_matches, ensure_mock, format_call, format_recorded_calls
from .number import ensure_positive_number, handle_numeric_comparison, is_number

__all__ = [
    # Guards
    "ensure_mock",
    "ensure_not_nullish",
    "ensure_positive_number",
    "ensure_type",
    "is_number",
    # Failure handlers
    "InfoBuilder",
    "handle_comparison_failure",
    "handle_diff_failure",
    "handle_failure",
    "handle_numeric_comparison",
    # Mock call helpers
    "call_matches",
    "format_call",
    "format_recorded_calls",
]
