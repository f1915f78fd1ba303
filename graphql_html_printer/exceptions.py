"""
Custom exceptions for schema documentation rendering.

Rendering is deterministic and has no partial-output mode: every error
defined here aborts the whole document.
"""

from typing import Any, Optional


class SchemaRenderError(Exception):
    """Base exception for schema rendering errors."""

    def __init__(self, message: str, element_name: Optional[str] = None):
        self.element_name = element_name
        super().__init__(message)


class UnsupportedShapeError(SchemaRenderError, ValueError):
    """Raised when the renderer is handed an object outside the supported set.

    Covers unknown value nodes, type wrappers, declaration kinds, member
    objects and schema objects.
    """

    def __init__(
        self,
        message: str,
        shape: Optional[Any] = None,
        element_name: Optional[str] = None,
    ):
        self.shape = shape
        super().__init__(message, element_name)

    @classmethod
    def for_object(cls, kind: str, obj: Any, element_name: Optional[str] = None):
        """Build the error for an unsupported ``obj`` of the given role."""
        return cls(
            f"Unsupported {kind}: {type(obj).__name__}",
            shape=type(obj).__name__,
            element_name=element_name,
        )
