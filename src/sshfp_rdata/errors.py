"""Exceptions raised while building and handling SSHFP RDATA."""
from __future__ import annotations


class RDataError(ValueError):
    """Base class for RDATA validation failures."""


class InvalidArgument(RDataError):
    """A field holds a value outside its permitted range."""


class MissingRequiredField(RDataError):
    """A required field was never supplied.

    Attributes:
        field: Name of the missing field.
    """

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} is required")
        self.field = field


class UnsupportedOperation(TypeError):
    """Mutation attempted on a read-only RDATA view."""
