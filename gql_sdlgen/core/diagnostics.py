"""Diagnostics reported while discovering descriptors and generating SDL.

None of these stop a run. A diagnostic records an element that was left
out of the output and why.
"""

from dataclasses import dataclass
from enum import Enum


class DescriptorError(ValueError):
    """Raised when a descriptor is built without a required value."""


class Severity(Enum):
    """Diagnostic severity. Generation only ever reports INFO."""
    INFO = "info"


class Reason(Enum):
    """Why an element was skipped."""
    MISSING_ANNOTATION = "MissingAnnotation"
    UNRESOLVED_REFERENCE = "UnresolvedReference"
    INVALID_BASE_TYPE = "InvalidBaseType"
    NO_CLASS_REFERENCE = "NoClassReference"
    MISSING_OPERATION_NAME = "MissingOperationName"
    INVALID_DESCRIPTOR = "InvalidDescriptor"


@dataclass(frozen=True)
class Diagnostic:
    """A skipped type, field, parameter or implements clause."""
    subject: str
    reason: Reason
    message: str = ""
    severity: Severity = Severity.INFO

    def __str__(self) -> str:
        text = f"[{self.reason.value}] {self.subject}"
        if self.message:
            text += f": {self.message}"
        return text
