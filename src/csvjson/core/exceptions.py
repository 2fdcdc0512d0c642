"""csvjson exception hierarchy."""

from __future__ import annotations


class CsvJsonError(Exception):
    """Base exception for all csvjson errors."""


class ConversionError(CsvJsonError):
    """Error while turning tabular text into a JSON document."""


class MalformedInputError(ConversionError):
    """The CSV text violates the delimited-text grammar."""

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(f"error reading CSV: {message}")


class EmptyInputError(ConversionError):
    """The input holds no rows, not even a header."""

    def __init__(self) -> None:
        super().__init__("CSV file is empty")


class SerializationError(ConversionError):
    """A record value could not be encoded as JSON."""

    def __init__(self, message: str) -> None:
        super().__init__(f"error converting to JSON: {message}")


class UploadError(CsvJsonError):
    """The upload request itself was unusable."""


class UnsupportedFileTypeError(UploadError):
    """Uploaded file name does not carry the .csv extension."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__(f"unsupported file type: {filename!r}")


class FormParseError(UploadError):
    """The multipart form could not be read."""
