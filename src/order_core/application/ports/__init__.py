"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from order_core.application.ports.lock_provider import LockProvider
from order_core.application.ports.order_repository import OrderRepository
from order_core.application.ports.payment_verifier import PaymentVerification, PaymentVerifier
from order_core.application.ports.product_repository import ProductRepository
from order_core.application.ports.time_provider import TimeProvider
from order_core.application.ports.transaction_ledger import TransactionLedger
from order_core.application.ports.user_directory import UserDirectory, UserProfile

__all__ = [
    "LockProvider",
    "OrderRepository",
    "PaymentVerification",
    "PaymentVerifier",
    "ProductRepository",
    "TimeProvider",
    "TransactionLedger",
    "UserDirectory",
    "UserProfile",
]
