"""Typed errors for phrase parsing and interchange ingestion."""

from enum import Enum


class ParseErrorKind(str, Enum):
    EMPTY_INPUT = "empty_input"
    EXPECTED_PRONOUN = "expected_pronoun"
    EXPECTED_RELATION_TERM = "expected_relation_term"
    UNKNOWN_RELATION_TERM = "unknown_relation_term"
    MISSING_LINE_CLAUSE = "missing_line_clause"
    EXPECTED_SIBLING_WORD = "expected_sibling_word"


class ParseError(ValueError):
    """A kinship phrase did not match the grammar.

    Args:
        kind: Which grammar expectation failed
        message: Human-readable description (Russian, shown to the user)
        position: Index of the offending token in the token list
        token: The offending token, or None when input ran out
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        message: str,
        position: int | None = None,
        token: str | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.position = position
        self.token = token

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (позиция {self.position})"


class SchemaError(ValueError):
    """Interchange data does not have the expected shape."""
