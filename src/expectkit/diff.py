"""Line oriented diffs between expected and received values."""

from __future__ import annotations

from collections.abc import Mapping
from difflib import SequenceMatcher
from typing import Any

from expectkit.colors import CYAN, DIM, EXPECTED, INVERSE, RECEIVED
from expectkit.equality import asymmetric_match, is_asymmetric
from expectkit.serialize import get_type, serialize


def normalize_asymmetric(expected: Any, received: Any) -> tuple[Any, Any]:
    """Replace satisfied patterns with the value they matched.

    Returns copies; neither input is modified. A pattern that matches its
    counterpart then renders identically on both sides and drops out of the
    diff.
    """
    if expected is received:
        return expected, received

    if asymmetric_match(expected, received) is True:
        if is_asymmetric(expected):
            return received, received
        return expected, expected

    if isinstance(expected, (list, tuple)) and isinstance(received, (list, tuple)):
        left, right = list(expected), list(received)
        for index in range(min(len(left), len(right))):
            left[index], right[index] = normalize_asymmetric(left[index], right[index])
        if isinstance(expected, tuple):
            left = tuple(left)
        if isinstance(received, tuple):
            right = tuple(right)
        return left, right

    if isinstance(expected, Mapping) and isinstance(received, Mapping):
        left, right = dict(expected), dict(received)
        for key in left.keys() & right.keys():
            left[key], right[key] = normalize_asymmetric(left[key], right[key])
        return left, right

    return expected, received


def highlight_line(expected: str, received: str) -> tuple[str, str]:
    """Mark the characters that differ between two lines."""
    left: list[str] = []
    right: list[str] = []
    matcher = SequenceMatcher(None, expected, received, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            left.append(expected[i1:i2])
            right.append(received[j1:j2])
            continue
        if i2 > i1:
            left.append(INVERSE(expected[i1:i2]))
        if j2 > j1:
            right.append(INVERSE(received[j1:j2]))
    return "".join(left), "".join(right)


def _hunk_header(expected_count: int, received_count: int) -> str:
    return CYAN(f"@@ -1,{expected_count} +1,{received_count} @@")


def diff_lines(expected: list[str], received: list[str], *, intraline: bool = False) -> list[str]:
    """Diff two line lists; ``-`` marks expected lines, ``+`` received lines."""
    result = ["", _hunk_header(len(expected), len(received)), ""]
    matcher = SequenceMatcher(None, expected, received, autojunk=False)

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            result.extend(DIM(f"  {line}") for line in expected[i1:i2])
            continue

        removed = expected[i1:i2]
        added = received[j1:j2]
        if intraline and tag == "replace":
            paired = min(len(removed), len(added))
            for index in range(paired):
                removed[index], added[index] = highlight_line(removed[index], added[index])

        result.extend(EXPECTED(f"- {line}") for line in removed)
        result.extend(RECEIVED(f"+ {line}") for line in added)

    return result


def diff_values(expected: Any, received: Any) -> str:
    """Readable diff of ``expected`` against ``received``."""
    expected_type = get_type(expected)
    received_type = get_type(received)

    result: list[str] = []
    if expected_type != received_type:
        result.append(f"Expected type: {EXPECTED(expected_type)}")
        result.append(f"Received type: {RECEIVED(received_type)}")

    if isinstance(expected, str) and isinstance(received, str):
        result.extend(diff_lines(expected.split("\n"), received.split("\n"), intraline=True))
        return "\n".join(result)

    expected, received = normalize_asymmetric(expected, received)
    result.extend(diff_lines(serialize(expected), serialize(received)))
    return "\n".join(result)


__all__ = ["diff_lines", "diff_values", "highlight_line", "normalize_asymmetric"]
