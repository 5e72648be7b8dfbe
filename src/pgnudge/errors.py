from __future__ import annotations


class ParseError(ValueError):
    """
    Raised when a game description cannot be parsed.
    """

    def __init__(self, message: str, *, statement: int | None = None) -> None:
        if statement is not None:
            message = f"statement {statement}: {message}"
        super().__init__(message)
        self.statement = statement


class MutationExhaustedError(RuntimeError):
    """
    Raised when the requested number of successful mutations could not be
    reached within the attempt budget.
    """

    def __init__(self, *, target: int, successes: int, attempts: int, reason: str) -> None:
        super().__init__(
            f"mutation exhausted after {attempts} attempts "
            f"({successes}/{target} successful): {reason}"
        )
        self.target = target
        self.successes = successes
        self.attempts = attempts
        self.reason = reason
