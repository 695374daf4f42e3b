from __future__ import annotations


class DiceError(ValueError):
    """User-facing validation errors (fail-fast, no roll performed)."""


class ParseError(DiceError):
    """The input text is not valid dice notation."""

    def __init__(self, message: str, token: str, position: int) -> None:
        super().__init__(message)
        self.token = token
        self.position = position


class InvalidTokenError(ParseError):
    def __init__(self, token: str, position: int) -> None:
        super().__init__(
            f"[INVALID_TOKEN] Could not understand token '{token}' at position {position}. Example: '2d20 + 5' or '-d8 - 3'.",
            token,
            position,
        )


class NumericOverflowError(ParseError):
    def __init__(self, token: str, position: int, field: str) -> None:
        super().__init__(
            f"[NUMERIC_OVERFLOW] The {field} in '{token}' at position {position} is out of range.",
            token,
            position,
        )
        self.field = field


class EmptyExpressionError(DiceError):
    def __init__(self) -> None:
        super().__init__("[EMPTY_INPUT] No dice or constants found. Example: 'd20' or '2d6 + 3'.")
