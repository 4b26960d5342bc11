"""Error Hierarchy — typed, categorized exceptions for all BlogHub failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are expected outcomes; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope for the error's own category
    - Auth errors use the {"error": message} shape, everything else {"status", "message"}

Design Decisions:
    - Single hierarchy with BlogHubError base: one global handler catches all (ADR: uniform error shape)
    - Field-scoped validation carries a field -> message map, same shape as binding errors
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    DATABASE = "database"
    INTERNAL = "internal"


class BlogHubError(Exception):
    """Base exception for all BlogHub errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {"status": self.http_status, "message": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(BlogHubError):
    """Requested resource does not exist."""
    def __init__(self, message: str):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )


class ResourceAlreadyExistsError(BlogHubError):
    """Create (or a storage constraint) would duplicate a unique value."""
    def __init__(self, message: str):
        super().__init__(
            message, "RESOURCE_ALREADY_EXISTS", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, 409,
        )


class BusinessRuleError(BlogHubError):
    """Whole-request validation failed (e.g. an empty update patch)."""
    def __init__(self, message: str):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, 400,
        )


class PatchValidationError(BlogHubError):
    """One or more touched fields failed validation.

    The response body is the bare field -> message map, identical to the
    binding-layer validation response.
    """
    def __init__(self, field_errors: dict[str, str]):
        super().__init__(
            f"Invalid fields: {', '.join(sorted(field_errors))}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.field_errors = field_errors

    def to_response(self) -> dict:
        return dict(self.field_errors)


# ─── Access Errors (401/403) ────────────────────────────────────

class AuthenticationRequiredError(BlogHubError):
    """No resolvable session, or the session carries no user."""
    def __init__(
        self, message: str = "Unauthorized: Please log in to access this resource.",
    ):
        super().__init__(
            message, "UNAUTHENTICATED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, 401,
        )

    def to_response(self) -> dict:
        return {"error": self.message}


class PermissionDeniedError(BlogHubError):
    """Authenticated principal lacks the role an access rule requires."""
    def __init__(
        self, message: str = "You do not have permission to perform this action.",
    ):
        super().__init__(
            message, "FORBIDDEN", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, 403,
        )

    def to_response(self) -> dict:
        return {"error": self.message}


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(BlogHubError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 503,
        )
        self.operation = operation
