"""Shared pytest fixtures for the test suite."""

from datetime import UTC, datetime
from decimal import Decimal

import pytest

from order_core.application.dtos import CartItemRequest, CreateOrderRequest
from order_core.application.ports import UserProfile
from order_core.domain.entities import Product, ShippingAddress
from order_core.domain.services import PricingPolicy
from order_core.domain.value_objects import Money, Principal
from order_core.infrastructure.lock_provider import NoOpLockProvider
from order_core.infrastructure.order_repository import InMemoryOrderRepository
from order_core.infrastructure.payment_verifier import StubPaymentVerifier
from order_core.infrastructure.product_repository import InMemoryProductRepository
from order_core.infrastructure.time_provider import FixedTimeProvider
from order_core.infrastructure.transaction_ledger import RepositoryTransactionLedger
from order_core.infrastructure.user_directory import InMemoryUserDirectory


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def time_provider(fixed_time: datetime) -> FixedTimeProvider:
    return FixedTimeProvider(fixed_time)


@pytest.fixture
def lock_provider() -> NoOpLockProvider:
    """Use NoOpLockProvider for unit tests (single-threaded)."""
    return NoOpLockProvider()


@pytest.fixture
def pricing_policy() -> PricingPolicy:
    return PricingPolicy(
        tax_rate=Decimal("0.15"),
        free_shipping_threshold=Money.of("100.00"),
        shipping_fee=Money.of("10.00"),
    )


@pytest.fixture
def products() -> list[Product]:
    return [
        Product(id="P1", name="Airpods", image="/images/airpods.jpg", price=Money.of("10.00")),
        Product(id="P2", name="Camera", image="/images/camera.jpg", price=Money.of("89.99")),
        Product(id="P3", name="Mouse", image="/images/mouse.jpg", price=Money.of("49.99")),
    ]


@pytest.fixture
def product_repository(products: list[Product]) -> InMemoryProductRepository:
    return InMemoryProductRepository(products)


@pytest.fixture
def order_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def transaction_ledger(order_repository: InMemoryOrderRepository) -> RepositoryTransactionLedger:
    return RepositoryTransactionLedger(order_repository)


@pytest.fixture
def payment_verifier() -> StubPaymentVerifier:
    return StubPaymentVerifier()


@pytest.fixture
def user_directory() -> InMemoryUserDirectory:
    return InMemoryUserDirectory(
        [
            UserProfile(id="user-1", name="John Doe", email="john@example.com"),
            UserProfile(id="user-2", name="Jane Doe", email="jane@example.com"),
            UserProfile(id="admin-1", name="Admin User", email="admin@example.com"),
        ]
    )


@pytest.fixture
def customer() -> Principal:
    return Principal(identity="user-1")


@pytest.fixture
def other_customer() -> Principal:
    return Principal(identity="user-2")


@pytest.fixture
def admin() -> Principal:
    return Principal(identity="admin-1", is_admin=True)


@pytest.fixture
def shipping_address() -> ShippingAddress:
    return ShippingAddress(
        address="123 Main St", city="Boston", postal_code="02101", country="USA"
    )


@pytest.fixture
def make_create_request(shipping_address: ShippingAddress):
    """Factory for CreateOrderRequest from (product_id, qty) pairs."""

    def _make(*lines: tuple[str, int], payment_method: str = "PayPal") -> CreateOrderRequest:
        return CreateOrderRequest(
            items=tuple(CartItemRequest(product_id=pid, qty=qty) for pid, qty in lines),
            shipping_address=shipping_address,
            payment_method=payment_method,
        )

    return _make
