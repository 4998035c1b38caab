"""Domain exceptions for order-core.

Exception hierarchy:
    DomainException (base)
    ├── Request Validation Errors
    │   └── InvalidRequestError
    │       ├── InvalidOrderIdError
    │       ├── InvalidTransactionIdError
    │       ├── InvalidQuantityError
    │       └── InvalidAmountError
    ├── Not Found Errors
    │   └── NotFoundError
    │       ├── OrderNotFoundError
    │       └── ProductNotFoundError
    ├── Payment Guard Rejections
    │   └── PaymentRejectedError
    │       ├── PaymentNotVerifiedError
    │       ├── DuplicateTransactionError
    │       └── AmountMismatchError
    ├── State & Transition Errors
    │   └── InvalidStateTransitionError
    │       └── OrderAlreadyPaidError
    └── Access Errors
        └── AccessDeniedError
            ├── UnauthorizedError
            └── ForbiddenError

None of these are retried by the core. Every transition is all-or-nothing:
when one of these is raised, no order record has been mutated.
"""

from __future__ import annotations

from collections.abc import Iterable


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


# =============================================================================
# Request Validation Errors
# =============================================================================


class InvalidRequestError(DomainException):
    """Raised for malformed or empty input (HTTP 400).

    The client must fix and resubmit the request.
    """


class InvalidOrderIdError(InvalidRequestError):
    """Raised when an order ID is not a valid UUID."""


class InvalidTransactionIdError(InvalidRequestError):
    """Raised when a provider transaction ID fails validation.

    TransactionId must be non-empty, at most 128 chars, charset [A-Za-z0-9-_].
    """


class InvalidQuantityError(InvalidRequestError):
    """Raised when a line item quantity is not a positive integer."""


class InvalidAmountError(InvalidRequestError):
    """Raised when a currency amount is negative, non-finite or a float."""


# =============================================================================
# Not Found Errors
# =============================================================================


class NotFoundError(DomainException):
    """Base for referenced-entity-absent errors (HTTP 404)."""


class OrderNotFoundError(NotFoundError):
    """Raised when an order cannot be found by ID."""


class ProductNotFoundError(NotFoundError):
    """Raised when a cart references products absent from the catalog.

    Carries every offending reference so the client can fix the cart
    in one round trip.
    """

    def __init__(self, product_refs: Iterable[str]) -> None:
        self.product_refs = tuple(product_refs)
        super().__init__(f"Product not found: {', '.join(self.product_refs)}")


# =============================================================================
# Payment Guard Rejections
# =============================================================================


class PaymentRejectedError(DomainException):
    """Base for payment confirmation guard failures.

    The transaction is rejected as a whole; the order stays unpaid
    (or keeps its previous payment result).
    """


class PaymentNotVerifiedError(PaymentRejectedError):
    """Raised when the payment provider does not confirm the transaction."""


class DuplicateTransactionError(PaymentRejectedError):
    """Raised when a transaction ID has already settled an order.

    Each provider transaction ID may settle at most one order, system-wide.
    Raised both by the ledger check and by the storage uniqueness constraint
    when two writers race.
    """


class AmountMismatchError(PaymentRejectedError):
    """Raised when the verified paid amount differs from the order total.

    Comparison is decimal-exact; a one-cent difference is a mismatch.
    """


# =============================================================================
# State & Transition Errors
# =============================================================================


class InvalidStateTransitionError(DomainException):
    """Raised when a transition violates the order lifecycle.

    Valid transitions:
        - unpaid → paid (exactly once)
        - undelivered → delivered (re-stamping allowed)
    """


class OrderAlreadyPaidError(InvalidStateTransitionError):
    """Raised when a paid order receives a second, different transaction.

    is_paid is monotonic and the payment result is never overwritten.
    """


# =============================================================================
# Access Errors
# =============================================================================


class AccessDeniedError(DomainException):
    """Base for failed principal checks."""


class UnauthorizedError(AccessDeniedError):
    """Raised when no authenticated principal is supplied (HTTP 401)."""


class ForbiddenError(AccessDeniedError):
    """Raised when the principal lacks ownership or the admin role (HTTP 403)."""
