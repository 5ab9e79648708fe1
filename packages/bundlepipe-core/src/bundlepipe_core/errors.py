"""Custom exception hierarchy for bundlepipe-core.

This module defines the exception classes raised by the compile pipeline:
- BundlepipeError: Base exception for all bundlepipe errors
- ValidationError: Raised when a bundle spec is missing required fields
- BundleError: Raised when the bundler (or the build observer) fails
- ConfigurationError: Raised when a build file or bundler path is invalid

User-facing messages are safe to display. Technical details are logged
internally via structlog and never appear in the exception message.
"""

from __future__ import annotations

import structlog

logger = structlog.get_logger(__name__)


class BundlepipeError(Exception):
    """Base exception for bundlepipe.

    Args:
        user_message: Safe message to display to the user.
        internal_details: Optional technical details. Logged internally
            but never exposed to the user.

    Example:
        >>> raise BundlepipeError(
        ...     "Build failed",
        ...     internal_details="bundler returned exit status 3",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize BundlepipeError with user message and optional internal details.

        Args:
            user_message: Safe message to display to the user.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(user_message)
        self.user_message = user_message

        if internal_details:
            logger.error(
                "bundlepipe_error",
                error_type=self.__class__.__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


class ValidationError(BundlepipeError):
    """Raised when a compile request or bundle spec fails validation.

    Raised before the bundler is invoked for the offending spec, so a
    validation failure never triggers a bundler call.

    Attributes:
        field: Name of the missing field ("src" or "dst"), or the dotted
            location of the first schema error in a malformed request.
        bundle_index: Position of the spec in the request, when known.

    Example:
        >>> raise ValidationError("missing dst", field="dst", bundle_index=2)
    """

    def __init__(
        self,
        user_message: str,
        *,
        field: str | None = None,
        bundle_index: int | None = None,
        internal_details: str | None = None,
    ) -> None:
        super().__init__(user_message, internal_details=internal_details)
        self.field = field
        self.bundle_index = bundle_index


class BundleError(BundlepipeError):
    """Raised when a bundle operation fails.

    Use this exception when:
    - The bundler's configure step raises
    - A library or standalone bundle operation raises
    - The bundler returns output that cannot be read
    - The build observer raises after a successful bundle

    The originating exception is chained (``raise ... from cause``) and also
    kept on ``cause`` for diagnostics.

    Attributes:
        dst: Output path of the failing bundle, if the failure is per-bundle.
        cause: The originating exception, if any.

    Example:
        >>> try:
        ...     await bundler.bundle_library("app/main", {})
        ... except Exception as exc:
        ...     raise BundleError("Bundle 'main.js' failed", dst="main.js", cause=exc) from exc
    """

    def __init__(
        self,
        user_message: str,
        *,
        dst: str | None = None,
        cause: BaseException | None = None,
        internal_details: str | None = None,
    ) -> None:
        if internal_details is None and cause is not None:
            internal_details = f"{type(cause).__name__}: {cause!r}"
        super().__init__(user_message, internal_details=internal_details)
        self.dst = dst
        self.cause = cause


class ConfigurationError(BundlepipeError):
    """Raised when a build file or bundler import path is invalid.

    Provides file path and field context for actionable error messages.

    Attributes:
        file_path: Path to the build file (if known).
        field_path: Dot-separated path to the invalid field (e.g., "bundles.0.options").

    Example:
        >>> raise ConfigurationError(
        ...     "Cannot import bundler 'acme.build:Missing'",
        ...     field_path="bundler",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        file_path: str | None = None,
        field_path: str | None = None,
        internal_details: str | None = None,
    ) -> None:
        context_parts: list[str] = []
        if file_path:
            context_parts.append(f"in {file_path}")
        if field_path:
            context_parts.append(f"field '{field_path}'")

        if context_parts:
            full_message = f"{user_message} ({', '.join(context_parts)})"
        else:
            full_message = user_message

        super().__init__(full_message, internal_details=internal_details)

        self.file_path = file_path
        self.field_path = field_path
