"""Error taxonomy for token minting and key publication."""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Caller or configuration error categories."""

    INVALID_INPUT = "InvalidInput"
    UNSUPPORTED_ALGORITHM = "UnsupportedAlgorithm"
    MISSING_KEY_MATERIAL = "MissingKeyMaterial"
    MALFORMED_KEY = "MalformedKey"


class IdTokenError(Exception):
    """Base error raised for invalid minting or publishing input."""

    kind: ErrorKind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class InvalidInputError(IdTokenError):
    kind = ErrorKind.INVALID_INPUT


class UnsupportedAlgorithmError(IdTokenError):
    kind = ErrorKind.UNSUPPORTED_ALGORITHM


class MissingKeyMaterialError(IdTokenError):
    kind = ErrorKind.MISSING_KEY_MATERIAL


class MalformedKeyError(IdTokenError):
    kind = ErrorKind.MALFORMED_KEY
