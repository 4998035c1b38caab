from uuid import UUID

import pytest

from order_core.domain.exceptions import InvalidOrderIdError, InvalidRequestError
from order_core.domain.value_objects import OrderId


class TestOrderIdGenerate:
    def test_generate_creates_valid_order_id(self) -> None:
        order_id = OrderId.generate()

        assert isinstance(order_id.value, UUID)

    def test_generate_creates_unique_ids(self) -> None:
        assert OrderId.generate() != OrderId.generate()


class TestOrderIdFromString:
    def test_from_string_parses_valid_uuid(self) -> None:
        uuid_str = "550e8400-e29b-41d4-a716-446655440000"

        order_id = OrderId.from_string(uuid_str)

        assert order_id.value == UUID(uuid_str)
        assert str(order_id) == uuid_str

    def test_from_string_parses_uppercase_uuid(self) -> None:
        order_id = OrderId.from_string("550E8400-E29B-41D4-A716-446655440000")

        assert str(order_id) == "550e8400-e29b-41d4-a716-446655440000"

    @pytest.mark.parametrize("value", ["not-a-valid-uuid", "", "550e8400-e29b-41d4-a716"])
    def test_from_string_raises_for_invalid_input(self, value: str) -> None:
        with pytest.raises(InvalidOrderIdError):
            OrderId.from_string(value)

    def test_invalid_order_id_is_an_invalid_request(self) -> None:
        with pytest.raises(InvalidRequestError):
            OrderId.from_string("nope")

    def test_from_string_raises_for_none(self) -> None:
        with pytest.raises(InvalidOrderIdError):
            OrderId.from_string(None)  # type: ignore[arg-type]
