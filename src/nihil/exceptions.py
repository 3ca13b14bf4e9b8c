"""Exception hierarchy for the nihil shape utilities.

Every error carries a machine-readable code and structured context so
callers can log or translate failures without parsing messages. Errors that
report a wrong argument type also subclass :class:`TypeError`, and cycle
errors subclass :class:`ValueError`, so plain ``except TypeError`` handlers
keep working.

Example:
    >>> from nihil.exceptions import NotAMappingError
    >>> raise NotAMappingError("source", 5)
    NotAMappingError: 'source' must be a mapping, got int (parameter=source, actual_type=int)
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "CyclicReferenceError",
    "InvalidPropertyNameError",
    "NihilError",
    "NotAMappingError",
]


class NihilError(Exception):
    """Base class for all nihil errors.

    Attributes:
        error_code: Machine-readable error code.
        message: Human-readable error description.
        context: Structured debugging information (parameter names, types, paths).
    """

    error_code: str = "NIHIL_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize error with message and optional context.

        Args:
            message: Human-readable error description.
            context: Structured debugging information. Keys should be snake_case.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """String representation including context for logging."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class NotAMappingError(NihilError, TypeError):
    """Raised when an argument that must be a keyed container is not one.

    Attributes:
        error_code: "NOT_A_MAPPING" (class constant).
        parameter: Name of the offending parameter.
        actual_type: Name of the type actually received.

    Example:
        >>> raise NotAMappingError("target", [1, 2], mutable=True)
        NotAMappingError: 'target' must be a mutable mapping, got list (...)
    """

    error_code: str = "NOT_A_MAPPING"

    def __init__(self, parameter: str, value: Any, *, mutable: bool = False) -> None:
        """Initialize not-a-mapping error.

        Args:
            parameter: Name of the parameter that failed the check.
            value: The value received for it.
            mutable: Whether the parameter must also support item assignment.
        """
        self.parameter = parameter
        self.actual_type = type(value).__name__
        kind = "mutable mapping" if mutable else "mapping"
        message = f"'{parameter}' must be a {kind}, got {self.actual_type}"
        context = {"parameter": parameter, "actual_type": self.actual_type}
        super().__init__(message, context)


class InvalidPropertyNameError(NihilError, TypeError):
    """Raised when a property name passed to ``from_object`` is not a string.

    Attributes:
        error_code: "INVALID_PROPERTY_NAME" (class constant).
        actual_type: Name of the type actually received.
    """

    error_code: str = "INVALID_PROPERTY_NAME"

    def __init__(self, value: Any) -> None:
        self.actual_type = type(value).__name__
        message = f"Property name must be a string, but got {self.actual_type}"
        super().__init__(message, {"actual_type": self.actual_type})


class CyclicReferenceError(NihilError, ValueError):
    """Raised when a recursive operation re-enters a container on its own path.

    Attributes:
        error_code: "CYCLIC_REFERENCE" (class constant).
        operation: Name of the operation that detected the cycle.
        path: Key path from the root container to the repeated container.

    Example:
        >>> raise CyclicReferenceError("cut_default", ("a", "b"))
        CyclicReferenceError: cut_default re-entered a container at 'a.b' (...)
    """

    error_code: str = "CYCLIC_REFERENCE"

    def __init__(self, operation: str, path: tuple[str, ...]) -> None:
        """Initialize cyclic reference error.

        Args:
            operation: Operation name (e.g., "deep_merge").
            path: Keys leading from the root to the repeated container.
        """
        self.operation = operation
        self.path = path
        dotted = ".".join(str(key) for key in path)
        message = f"{operation} re-entered a container at '{dotted}'"
        super().__init__(message, {"operation": operation, "path": dotted})
