from __future__ import annotations


class AggregatorError(Exception):
    """Base class for every failure that aborts a run."""

    stage = "pipeline"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"[{self.stage}] {self.message}"


class IoError(AggregatorError):
    stage = "io"


class ParseError(AggregatorError):
    stage = "parse"

    def __init__(self, message: str, line: int | None = None, field: str | None = None):
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line
        self.field = field


class SerializeError(IoError):
    stage = "serialize"
