"""Rendering of the assertion statement heading every failure message."""

from __future__ import annotations

from collections.abc import Sequence

from expectkit.colors import DIM, EXPECTED, RECEIVED


def compose_statement(
    assertion_chain: Sequence[str],
    expected_labels: Sequence[str] = (),
    received_label: str = "received",
    comment: str | None = None,
) -> str:
    """Render ``expect(received).<chain>(<expected labels>)``.

    Raises:
    ------
    ExpectConfigError
        If ``assertion_chain`` is empty.
    """
    if not assertion_chain:
        from expectkit.errors import ExpectConfigError

        msg = 'Expected non-empty matcher chain (e.g., ["to_equal"]). Received an empty chain.'
        raise ExpectConfigError(msg)

    labels = ", ".join(EXPECTED(label) for label in expected_labels)
    statement = f"{DIM('expect(')}{RECEIVED(received_label)}{DIM(')')}.{'.'.join(assertion_chain)}({labels})"

    if comment:
        statement += DIM(f" // {comment}")
    return statement


__all__ = ["compose_statement"]
