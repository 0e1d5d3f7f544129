"""Custom Exception Hierarchy

Exception hierarchy for slide-packer providing granular exception types for
input validation, preview rendering and deck pipeline failures.

The packing stages themselves never raise for content problems: malformed style
values fall back to defaults and unresolved collisions are placed best-effort.
These exceptions guard the boundaries around the packer.
"""


class SlidePackerError(Exception):
    """Base exception for all slide-packer errors.

    Catching this exception will catch all custom exceptions from the package.
    """
    pass


# Validation Errors
class ValidationError(SlidePackerError):
    """Raised when input validation fails."""
    pass


class InvalidFileError(ValidationError):
    """Raised when file validation fails (doesn't exist, wrong extension, etc.)."""
    pass


class FileSizeLimitExceededError(ValidationError):
    """Raised when a measurement file exceeds the size limit."""

    def __init__(self, file_size: float, max_size: float):
        self.file_size = file_size
        self.max_size = max_size
        super().__init__(
            f"File size {file_size:.1f} MB exceeds maximum allowed size {max_size:.1f} MB"
        )


class InvalidConfigurationError(ValidationError):
    """Raised when packing options are out of range."""
    pass


class MeasurementParsingError(ValidationError):
    """Raised when a measurement record cannot be parsed."""

    def __init__(self, field: str, reason: str):
        self.field = field
        super().__init__(f"Failed to parse measurement field '{field}': {reason}")


# Rendering Errors
class RenderingError(SlidePackerError):
    """Base class for preview rendering errors."""
    pass


class PreviewRenderingError(RenderingError):
    """Raised when the preview document cannot be written."""

    def __init__(self, output_path: str, reason: str):
        self.output_path = output_path
        super().__init__(f"Failed to write preview '{output_path}': {reason}")


# Pipeline Errors
class PipelineError(SlidePackerError):
    """Base class for deck pipeline errors."""
    pass


class PipelineStepError(PipelineError):
    """Raised when a specific pipeline step fails.

    This wraps the underlying exception while preserving the pipeline context.
    """

    def __init__(self, step_name: str, original_exception: Exception):
        self.step_name = step_name
        self.original_exception = original_exception
        super().__init__(
            f"Pipeline step '{step_name}' failed: {str(original_exception)}"
        )
