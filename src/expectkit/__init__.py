"""Expectkit - Jest-style expectations for Python tests."""

from . import matchers  # noqa: F401  registers the built-in matchers
from .config import ExpectConfig, configure, get_config, load_config, reset_config
from .equality import equals
from .errors import (
    ExpectBaseError,
    ExpectConfigError,
    ExpectError,
    ExpectPromiseError,
    ExpectTypeError,
    PatternArgumentError,
)
from .expect import Expect, expect
from .patterns import (
    any_,
    anything,
    array_containing,
    array_of,
    close_to,
    not_,
    object_containing,
    patterns,
    string_containing,
    string_matching,
)
from .registry import matcher
from .result import AssertionResult
from .service import ChainModifiers, MatcherService
from .types import MISSING
from .version import __version__


__all__ = [
    # Core
    "Expect",
    "expect",
    "MatcherService",
    "ChainModifiers",
    "AssertionResult",
    "MISSING",
    "equals",
    "matcher",
    # Patterns
    "patterns",
    "any_",
    "anything",
    "array_containing",
    "array_of",
    "close_to",
    "not_",
    "object_containing",
    "string_containing",
    "string_matching",
    # Errors
    "ExpectBaseError",
    "ExpectConfigError",
    "ExpectError",
    "ExpectPromiseError",
    "ExpectTypeError",
    "PatternArgumentError",
    # Configuration
    "ExpectConfig",
    "configure",
    "get_config",
    "load_config",
    "reset_config",
    "__version__",
]
