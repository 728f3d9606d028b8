"""Outcome of a single matcher evaluation."""

from typing import Any

from pydantic import BaseModel


class AssertionResult(BaseModel):
    """Result attached to a failed expectation.

    Attributes:
    ----------
    name : str
        Name of the matcher that was evaluated
    passed : bool
        Raw outcome of the matcher, before negation is taken into account
    expected : Any
        Expected value handed to the matcher, if any
    received : Any
        Value the matcher was evaluated against
    message : str | None
        Final composed failure message
    """

    name: str
    passed: bool
    expected: Any = None
    received: Any = None
    message: str | None = None

    def __bool__(self) -> bool:
        return self.passed
