"""Domain exceptions.

All domain-level errors raised by the catalog and review workflows.
Each error carries a machine-readable ``error_code`` and the HTTP status
the API layer answers with.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    error_code = "ERROR"
    status_code = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# State Machine Errors
# ============================================================================


class InvalidStateTransitionError(DomainError):
    """Raised when an invalid state transition is attempted."""

    error_code = "INVALID_STATE_TRANSITION"
    status_code = 409

    def __init__(
        self,
        entity_type: str,
        entity_id: str,
        current_state: str,
        target_state: str,
        allowed_transitions: list[str] | None = None,
    ) -> None:
        """Initialize invalid state transition error.

        Args:
            entity_type: Type of entity (e.g., "ReviewToken").
            entity_id: ID of the entity.
            current_state: Current state of the entity.
            target_state: Attempted target state.
            allowed_transitions: List of allowed target states from current state.
        """
        allowed = allowed_transitions or []
        message = (
            f"Cannot transition {entity_type}({entity_id}) "
            f"from '{current_state}' to '{target_state}'. "
            f"Allowed transitions: {allowed}"
        )
        super().__init__(
            message,
            details={
                "entity_type": entity_type,
                "entity_id": entity_id,
                "current_state": current_state,
                "target_state": target_state,
                "allowed_transitions": allowed,
            },
        )


# ============================================================================
# Request Errors
# ============================================================================


class ValidationFailedError(DomainError):
    """Raised when a request is missing required fields or is malformed."""

    error_code = "VALIDATION_FAILED"
    status_code = 400

    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        super().__init__(message, details={"fields": fields or []})


# ============================================================================
# Product Errors
# ============================================================================


class ProductNotFoundError(DomainError):
    """Raised when no product matches the numeric id."""

    error_code = "PRODUCT_NOT_FOUND"
    status_code = 404

    def __init__(self, product_id: int) -> None:
        super().__init__(
            "Product not found",
            details={"product_id": product_id},
        )


class DuplicateProductError(DomainError):
    """Raised when a product with the same numeric id already exists."""

    error_code = "PRODUCT_ALREADY_EXISTS"
    status_code = 409

    def __init__(self, product_id: int) -> None:
        super().__init__(
            "Product already exists",
            details={"product_id": product_id},
        )


# ============================================================================
# Review Token Errors
# ============================================================================


INVALID_TOKEN_MESSAGE = "This link has expired or is invalid."


class InvalidOrExpiredTokenError(DomainError):
    """Raised when a review token is not live for the product.

    Covers unknown products, never-issued tokens, already consumed tokens
    and tokens issued for another product. All of them look the same to
    the caller.
    """

    error_code = "INVALID_OR_EXPIRED_TOKEN"
    status_code = 403

    def __init__(self, product_id: int) -> None:
        super().__init__(
            INVALID_TOKEN_MESSAGE,
            details={"product_id": product_id},
        )


# ============================================================================
# Infrastructure Errors
# ============================================================================


class StoreUnavailableError(DomainError):
    """Raised when the product store fails or times out."""

    error_code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(
            f"Product store failed during {operation}",
            details={"operation": operation, "reason": reason},
        )


class TextGenerationError(DomainError):
    """Raised when the generative-text provider cannot produce a description."""

    error_code = "TEXT_GENERATION_FAILED"
    status_code = 500
