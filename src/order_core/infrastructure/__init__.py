"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Persistence: In-memory repositories and the persisted order record layout
- External Services: PayPal payment verifier (httpx) and an in-memory stub
- Time Provider: Clock abstraction for testability
- Locking: Per-order locking

Infrastructure adapters implement the ports defined in the application layer.
"""

from order_core.infrastructure.lock_provider import InMemoryLockProvider, NoOpLockProvider
from order_core.infrastructure.order_repository import InMemoryOrderRepository
from order_core.infrastructure.payment_verifier import StubPaymentVerifier
from order_core.infrastructure.paypal import PaymentProviderError, PayPalPaymentVerifier
from order_core.infrastructure.product_repository import InMemoryProductRepository
from order_core.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider
from order_core.infrastructure.transaction_ledger import RepositoryTransactionLedger
from order_core.infrastructure.user_directory import InMemoryUserDirectory

__all__ = [
    "FixedTimeProvider",
    "InMemoryLockProvider",
    "InMemoryOrderRepository",
    "InMemoryProductRepository",
    "InMemoryUserDirectory",
    "NoOpLockProvider",
    "PayPalPaymentVerifier",
    "PaymentProviderError",
    "RepositoryTransactionLedger",
    "StubPaymentVerifier",
    "SystemTimeProvider",
]
