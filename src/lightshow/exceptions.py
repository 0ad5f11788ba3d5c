"""
Errors raised by lightshow.

Every error names the stage it belongs to (parse, lookup, bridge, color,
config) so the CLI can report where a run failed.
"""

from __future__ import annotations


class LightshowError(Exception):
    """Base exception for all lightshow errors."""

    stage = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# =============================================================================
# Parse errors
# =============================================================================


class ParseError(LightshowError):
    """Base exception for errors found while parsing a script."""

    stage = "parse"


class ScriptSyntaxError(ParseError):
    """Script text does not match the grammar."""

    def __init__(self, reason: str, line: int, column: int):
        super().__init__(f"line {line}, column {column}: {reason}")
        self.reason = reason
        self.line = line
        self.column = column


class UnknownKeywordError(ParseError):
    """A type or directive keyword outside the recognized set."""

    def __init__(self, kind: str, keyword: str, allowed: list[str]):
        super().__init__(
            f"Unknown {kind} '{keyword}' (expected one of: {', '.join(allowed)})"
        )
        self.kind = kind
        self.keyword = keyword


class VariableTypeError(ParseError):
    """Declared variable type does not match the bound value."""

    def __init__(self, name: str, declared: str, actual: str):
        super().__init__(
            f"Variable '{name}' is declared '{declared}' but bound to {actual}"
        )
        self.name = name
        self.declared = declared
        self.actual = actual


# =============================================================================
# Runtime errors
# =============================================================================


class UndefinedVariableError(LightshowError):
    """A variable was used before it was bound."""

    stage = "lookup"

    def __init__(self, name: str):
        super().__init__(f"Undefined variable '{name}'")
        self.name = name


class BridgeCommunicationError(LightshowError):
    """A call to the Hue bridge failed."""

    stage = "bridge"

    def __init__(self, reason: str):
        super().__init__(f"Bridge communication failed: {reason}")
        self.reason = reason


class ColorConversionError(LightshowError):
    """A hex color could not be converted."""

    stage = "color"

    def __init__(self, value: str, reason: str = "expected 6 hex digits"):
        super().__init__(f"Invalid hex color '{value}': {reason}")
        self.value = value


class ConfigError(LightshowError):
    """Configuration is missing or incomplete."""

    stage = "config"
