"""
Error types for the txr expression pipeline.

Every phase reports its first fault by raising one of these. The pipeline
driver turns them into a single diagnostic slot.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Diagnostic:
    """
    A fault message with its source location.

    Attributes:
        message: Human-readable description of the fault
        position: Zero-based byte offset into the source, or None when the
            fault was detected at end of input
    """

    message: str
    position: int | None = None

    @property
    def location(self) -> str:
        """Location as shown to the user: "position 3" or "<EOF>"."""
        if self.position is None:
            return "<EOF>"
        return f"position {self.position}"

    def format(self) -> str:
        """
        Format the diagnostic as a human-readable string.

        Returns:
            Formatted string like: "unexpected token at position 4"
        """
        return f"{self.message} at {self.location}"

    def __str__(self) -> str:
        return self.format()


class TxrError(Exception):
    """Base exception for all txr faults."""

    def __init__(self, message: str, position: int | None = None):
        self.diagnostic = Diagnostic(message, position)
        super().__init__(self.diagnostic.format())

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def position(self) -> int | None:
        return self.diagnostic.position


class LexFault(TxrError):
    """
    Raised when the tokenizer meets a character it cannot start a token with.

    Examples:
    - "10 $ 2"
    - "3 & 4"
    """

    pass


class ParseFault(TxrError):
    """
    Raised when the token sequence does not form one expression.

    Examples:
    - A token that cannot start a primary: "* 3"
    - Missing closing parenthesis: "(1 + 2"
    - Trailing data after a complete expression: "1 2"
    """

    pass


class CompileFault(TxrError):
    """Raised when the compiler is handed something that is not an AST node."""

    pass


class RuntimeFault(TxrError):
    """
    Raised when a program cannot be executed.

    Examples:
    - Evaluating an identifier (no binding semantics exist)
    - Unknown operator code
    - Stack underflow or a program that leaves the stack unbalanced
    """

    pass
