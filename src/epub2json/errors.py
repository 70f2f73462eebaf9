"""Errors raised while converting an EPUB package."""

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a conversion failure."""

    INPUT = "input"
    SCHEMA = "schema"
    REFERENCE = "reference"
    POLICY = "policy"


class ConversionError(Exception):
    """Base class for every failure that aborts a conversion run."""

    kind: ErrorKind = ErrorKind.INPUT

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputError(ConversionError):
    """Source file missing, unreadable, or not an EPUB container."""

    kind = ErrorKind.INPUT


class SchemaError(ConversionError):
    """A required descriptor element or attribute is absent or duplicated."""

    kind = ErrorKind.SCHEMA

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class MissingEntryError(ConversionError):
    """A referenced path does not exist in the archive."""

    kind = ErrorKind.REFERENCE


class MissingReferenceError(ConversionError):
    """A manifest id referenced by the spine is not declared."""

    kind = ErrorKind.REFERENCE


class PolicyError(ConversionError):
    """Package content that the merge pipeline cannot handle."""

    kind = ErrorKind.POLICY
