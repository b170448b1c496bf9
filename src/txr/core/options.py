from dataclasses import dataclass


@dataclass
class RunOptions:
    """Run-time switches for one pipeline invocation."""

    trace: bool = False  # Log every evaluator step at DEBUG
