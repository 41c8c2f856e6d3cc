"""Custom exception hierarchy for docschema-core.

This module defines the exception classes raised by the schema compiler:
- DocSchemaError: Base exception for all docschema errors
- CompilationError: Raised when a type cannot be compiled to JSON Schema
- UnsupportedTypeError: Raised for type shapes with no schema mapping
- IgnoreConflictError: Raised when a required member is marked @ignore
- RecursiveTypeError: Raised when a struct type contains itself
- ExportError: Raised when an exported schema cannot be written

User-facing messages are safe to display; technical details are logged
internally via structlog and never appended to the message.
"""

from __future__ import annotations

import structlog

logger = structlog.get_logger(__name__)


class DocSchemaError(Exception):
    """Base exception for docschema.

    All docschema exceptions inherit from this class. User-facing messages
    are safe to display; technical details are logged internally.

    Args:
        user_message: Safe message to display to the user.
        internal_details: Optional technical details for logging. This is
            logged internally but NEVER exposed in the message.

    Example:
        >>> raise DocSchemaError(
        ...     "Schema compilation failed",
        ...     internal_details="member 'age' of Person resolved to object",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize DocSchemaError with user message and optional internal details.

        Args:
            user_message: Safe message to display to the user.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(user_message)
        self.user_message = user_message

        if internal_details:
            logger.error(
                "docschema_error",
                error_type=self.__class__.__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


class CompilationError(DocSchemaError):
    """Raised when a type cannot be compiled to a JSON Schema node.

    Compilation is deterministic, so a CompilationError is final for the
    given input: retrying without changing the type will fail the same way.
    No partial schema is ever returned alongside it.
    """

    pass


class UnsupportedTypeError(CompilationError):
    """Raised when a type has no JSON Schema mapping.

    Covers tuple types, intersection types, unions that are not made only of
    literals, and any type matching none of the classification rules.

    Attributes:
        kind: Which rule rejected the type ("complex union", "tuple",
            "intersection" or "unsupported").
        type_name: Type name as rendered by the type model.

    Example:
        >>> raise UnsupportedTypeError("tuple", "tuple[int, str]")
        # User sees: "Tuple types are not supported: tuple[int, str]"
    """

    MESSAGES = {
        "complex union": (
            "Complex union types are not supported. "
            "Only literal type unions (enums) are supported: {type_name}"
        ),
        "tuple": "Tuple types are not supported: {type_name}",
        "intersection": "Intersection types are not supported: {type_name}",
        "unsupported": "Unsupported type: {type_name}",
    }

    def __init__(
        self,
        kind: str,
        type_name: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize UnsupportedTypeError.

        Args:
            kind: Rejection rule, one of the keys of MESSAGES.
            type_name: Rendered name of the rejected type.
            internal_details: Technical details for internal logging only.
        """
        template = self.MESSAGES.get(kind, self.MESSAGES["unsupported"])
        super().__init__(
            template.format(type_name=type_name),
            internal_details=internal_details,
        )

        self.kind = kind
        self.type_name = type_name


class IgnoreConflictError(CompilationError):
    """Raised when a required object member carries an ``@ignore`` tag.

    Only optional members may be left out of a schema; dropping a required
    member would produce a schema that rejects every valid instance.

    Attributes:
        property_name: Name of the offending member.

    Example:
        >>> raise IgnoreConflictError("age")
        # User sees: "Cannot ignore required property: age"
    """

    def __init__(
        self,
        property_name: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize IgnoreConflictError.

        Args:
            property_name: Name of the required member marked @ignore.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(
            f"Cannot ignore required property: {property_name}",
            internal_details=internal_details,
        )

        self.property_name = property_name


class RecursiveTypeError(CompilationError):
    """Raised when a struct type is reached again while it is being compiled.

    The compiler emits inline schemas only, so a self-referential type has
    no finite representation.

    Attributes:
        type_name: Rendered name of the recursive type.
        path: Rendered names of the struct types on the active path,
            outermost first, ending with the re-entered type.
    """

    def __init__(
        self,
        type_name: str,
        path: list[str] | None = None,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize RecursiveTypeError.

        Args:
            type_name: Rendered name of the recursive type.
            path: Rendered struct names on the active recursion path.
            internal_details: Technical details for internal logging only.
        """
        self.path = path or [type_name]
        super().__init__(
            f"Recursive types are not supported: {' -> '.join(self.path)}",
            internal_details=internal_details,
        )

        self.type_name = type_name


class ExportError(DocSchemaError):
    """Raised when a compiled schema cannot be written to disk.

    Attributes:
        output_path: Destination that could not be written.
    """

    def __init__(
        self,
        output_path: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize ExportError.

        Args:
            output_path: Destination path of the schema file.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(
            f"Cannot write schema to: {output_path}",
            internal_details=internal_details,
        )

        self.output_path = output_path
