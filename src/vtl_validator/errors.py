"""Exception hierarchy for vtl-validator.

This module defines the exception classes raised while compiling
@validator directives:
- ValidatorError: Base exception for all vtl-validator errors
- InvalidDirectiveError: Raised when a directive cannot be compiled

User-facing messages are safe to surface as schema compilation failures.
Technical details (pydantic error dumps, raw argument records) are logged
internally via structlog and never attached to the message.
"""

from __future__ import annotations

import structlog

logger = structlog.get_logger(__name__)


class ValidatorError(Exception):
    """Base exception for vtl-validator.

    Args:
        user_message: Message describing the failure to the schema author.
        internal_details: Optional technical details for logging only.

    Example:
        >>> raise ValidatorError(
        ...     "Directive could not be compiled",
        ...     internal_details="arrayInt[1]: Input should be a valid integer",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize ValidatorError with user message and optional internal details.

        Args:
            user_message: Message describing the failure to the schema author.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(user_message)
        self.user_message = user_message

        if internal_details:
            logger.error(
                "validator_error",
                error_type=self.__class__.__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


class InvalidDirectiveError(ValidatorError):
    """Raised when a @validator directive occurrence is invalid.

    Use this exception when:
    - The parent type lacks the @model marker directive
    - The validator type or filter name is unknown
    - The declared field type is not supported by the validator type
    - A parameter required by the validator type is missing or malformed

    Attributes:
        type_name: Name of the owning type (if known).
        field_name: Name of the annotated field (if known).

    Example:
        >>> raise InvalidDirectiveError(
        ...     "arrayString must be defined",
        ...     type_name="Post",
        ...     field_name="title",
        ... )
        # User sees: "arrayString must be defined (type 'Post', field 'title')"
    """

    def __init__(
        self,
        user_message: str,
        *,
        type_name: str | None = None,
        field_name: str | None = None,
        internal_details: str | None = None,
    ) -> None:
        """Initialize InvalidDirectiveError with schema location context.

        Args:
            user_message: Message describing the failure to the schema author.
            type_name: Name of the owning type (optional).
            field_name: Name of the annotated field (optional).
            internal_details: Technical details for internal logging only.
        """
        context_parts: list[str] = []
        if type_name:
            context_parts.append(f"type '{type_name}'")
        if field_name:
            context_parts.append(f"field '{field_name}'")

        if context_parts:
            full_message = f"{user_message} ({', '.join(context_parts)})"
        else:
            full_message = user_message

        super().__init__(full_message, internal_details=internal_details)

        self.type_name = type_name
        self.field_name = field_name
