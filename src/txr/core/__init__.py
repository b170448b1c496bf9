"""Core txr functionality: IR, the arithmetic pipeline and its errors."""

from . import ir
from .errors import (
    CompileFault,
    Diagnostic,
    LexFault,
    ParseFault,
    RuntimeFault,
    TxrError,
)
from .options import RunOptions

__all__ = [
    "ir",
    "Diagnostic",
    "TxrError",
    "LexFault",
    "ParseFault",
    "CompileFault",
    "RuntimeFault",
    "RunOptions",
]
