from typing import Dict, List, Optional, TypedDict, Union


class PathDetails(TypedDict, total=False):
    """Type-safe details for input path errors."""

    path: str
    expected: str
    extension: str


class ConversionDetails(TypedDict, total=False):
    """Type-safe details for conversion errors."""

    file_name: str
    output_format: str
    stage: str


ErrorDetails = Union[
    PathDetails,
    ConversionDetails,
    Dict[str, Union[str, int, List[str]]],
]


class WebPConvertError(Exception):
    """Base exception for all WebP converter errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        details: Optional[ErrorDetails] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class InputNotFoundError(WebPConvertError):
    """Raised when the input file or directory does not exist."""

    def __init__(self, message: str, details: Optional[PathDetails] = None):
        super().__init__(message=message, error_code="WPC001", details=details)


class UnsupportedInputError(WebPConvertError):
    """Raised when a single input file is not a WebP image."""

    def __init__(self, message: str, details: Optional[PathDetails] = None):
        super().__init__(message=message, error_code="WPC002", details=details)


class ConversionFailedError(WebPConvertError):
    """Raised when the image library fails to decode or encode an image."""

    def __init__(self, message: str, details: Optional[ConversionDetails] = None):
        super().__init__(message=message, error_code="WPC003", details=details)
