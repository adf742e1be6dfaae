"""Exception hierarchy for the ER diagram recognizer."""

from typing import Optional


class ErdRecognizerError(Exception):
    """Root of every error raised by this package.

    Attributes:
        message: What went wrong
        error_code: Short machine-readable tag, shown as ``[CODE]`` prefix
    """

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self) -> str:
        text = f"[{self.error_code}] {self.message}" if self.error_code else self.message
        context = self._context()
        return f"{text} ({context})" if context else text

    def _context(self) -> Optional[str]:
        """Extra detail appended in parentheses, if any."""
        return None


class ConfigurationError(ErdRecognizerError):
    """Classifier or rendering settings out of range.

    Attributes:
        config_key: Offending setting, when a single one is to blame
    """

    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message, error_code="CONFIG_ERROR")
        self.config_key = config_key

    def _context(self) -> Optional[str]:
        return f"setting: {self.config_key}" if self.config_key else None


class ImageProcessingError(ErdRecognizerError):
    """A diagram image could not be decoded, converted or written.

    Attributes:
        image_path: File being read or written
    """

    def __init__(self, message: str, image_path: Optional[str] = None):
        super().__init__(message, error_code="IMAGE_ERROR")
        self.image_path = image_path

    def _context(self) -> Optional[str]:
        return f"image: {self.image_path}" if self.image_path else None


class InvalidContourError(ErdRecognizerError):
    """Contour too small to bound or to treat as a closed polygon.

    Attributes:
        contour_id: Extraction id of the contour, when known
    """

    def __init__(self, message: str, contour_id: Optional[int] = None):
        super().__init__(message, error_code="INVALID_CONTOUR")
        self.contour_id = contour_id

    def _context(self) -> Optional[str]:
        return f"contour: {self.contour_id}" if self.contour_id is not None else None


class ValidationError(ErdRecognizerError):
    """Malformed input data such as an expected-counts file.

    Attributes:
        field: Name of the rejected field or collection
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, error_code="VALIDATION_ERROR")
        self.field = field

    def _context(self) -> Optional[str]:
        return f"field: {self.field}" if self.field else None
