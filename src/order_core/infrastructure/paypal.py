"""PayPal payment verifier over the PayPal REST API, via httpx.

Flow per verification (no caching, every call hits the provider):
1. POST /v1/oauth2/token with client credentials -> bearer token
2. GET /v2/checkout/orders/{transaction_id}
3. verified = status == "COMPLETED"; amount = purchase_units[0].amount.value
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from order_core.application.ports import PaymentVerification, PaymentVerifier

if TYPE_CHECKING:
    from order_core.config import PayPalSettings
    from order_core.domain.value_objects import TransactionId

logger = logging.getLogger(__name__)

COMPLETED = "COMPLETED"


class PaymentProviderError(Exception):
    """Raised when the payment provider cannot be reached or answers badly.

    An infrastructure failure, not a business rejection: it does not derive
    from DomainException. Not retried.
    """


class PayPalPaymentVerifier(PaymentVerifier):
    """Verifies transactions against the PayPal Orders API.

    Pass an httpx.Client to control transport (tests use httpx.MockTransport);
    otherwise one is created from the settings and owned by this verifier.
    """

    def __init__(self, settings: PayPalSettings, client: httpx.Client | None = None) -> None:
        self._settings = settings
        self._owns_client = client is None
        self._client = client or httpx.Client(
            base_url=settings.api_url,
            timeout=httpx.Timeout(settings.timeout_seconds),
        )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> PayPalPaymentVerifier:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def verify(self, transaction_id: TransactionId) -> PaymentVerification:
        access_token = self._get_access_token()

        logger.debug("Verifying PayPal transaction %s", transaction_id)
        response = self._request(
            "GET",
            f"/v2/checkout/orders/{transaction_id.value}",
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {access_token}",
            },
        )

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.info("PayPal has no order for transaction %s", transaction_id)
            return PaymentVerification(verified=False, amount="")

        data = self._json(response, "order lookup")
        try:
            amount = data["purchase_units"][0]["amount"]["value"]
            status = data["status"]
        except (KeyError, IndexError, TypeError) as e:
            logger.error("Malformed PayPal order response for %s", transaction_id)
            raise PaymentProviderError(
                f"Malformed PayPal order response for transaction {transaction_id}"
            ) from e

        return PaymentVerification(verified=status == COMPLETED, amount=str(amount))

    def _get_access_token(self) -> str:
        response = self._request(
            "POST",
            "/v1/oauth2/token",
            auth=(self._settings.client_id, self._settings.app_secret),
            headers={"Accept": "application/json", "Accept-Language": "en_US"},
            data={"grant_type": "client_credentials"},
        )
        data = self._json(response, "access token")
        token = data.get("access_token") if isinstance(data, dict) else None
        if not token:
            logger.error("PayPal token response carried no access_token")
            raise PaymentProviderError("Failed to get PayPal access token")
        return token

    def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error("PayPal request %s %s failed: %s", method, url, e)
            raise PaymentProviderError(f"PayPal request failed: {e}") from e

        if response.is_error and response.status_code != httpx.codes.NOT_FOUND:
            logger.error(
                "PayPal request %s %s returned HTTP %s", method, url, response.status_code
            )
            raise PaymentProviderError(
                f"PayPal request {method} {url} returned HTTP {response.status_code}"
            )
        return response

    @staticmethod
    def _json(response: httpx.Response, what: str) -> Any:
        if response.status_code == httpx.codes.NOT_FOUND:
            raise PaymentProviderError(f"PayPal {what} endpoint not found")
        try:
            return response.json()
        except ValueError as e:
            raise PaymentProviderError(f"PayPal {what} response is not JSON") from e
