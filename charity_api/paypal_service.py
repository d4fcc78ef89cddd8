from decimal import Decimal

import structlog

from charity_api.errors import ProviderError
from charity_api.provider_base import COMPLETED, FAILED, Initiation, PaymentProvider

logger = structlog.get_logger()

PAYPAL_BASE_URLS = {
    "sandbox": "https://api-m.sandbox.paypal.com",
    "live": "https://api-m.paypal.com",
}


def approve_link(order: dict) -> str | None:
    for link in order.get("links") or []:
        if link.get("rel") == "approve":
            return link.get("href")
    return None


class PayPalService(PaymentProvider):
    """PayPal Orders v2: create with CAPTURE intent, capture after approval."""

    name = "paypal"

    def __init__(self, client_id, client_secret, mode="sandbox", currency="USD", description="Donation", client=None, timeout=30.0):
        if mode not in PAYPAL_BASE_URLS:
            raise ValueError(f"Unknown PayPal mode: {mode}")
        super().__init__(PAYPAL_BASE_URLS[mode], client=client, timeout=timeout)
        self.client_id = client_id
        self.client_secret = client_secret
        self.currency = currency
        self.description = description

    @classmethod
    def from_settings(cls, settings, client=None):
        return cls(
            client_id=settings.paypal_client_id,
            client_secret=settings.paypal_client_secret,
            mode=settings.paypal_mode,
            currency=settings.paypal_currency,
            description=f"Donation to {settings.org_name}",
            client=client,
            timeout=settings.provider_timeout_seconds,
        )

    def _access_token(self) -> str:
        response = self._send(
            "POST",
            "/v1/oauth2/token",
            auth=(self.client_id or "", self.client_secret or ""),
            data={"grant_type": "client_credentials"},
        )
        data = self._expect_success(response, "oauth token")
        token = data.get("access_token")
        if not token:
            raise ProviderError(self.name, "oauth token missing from response")
        return token

    def _headers(self):
        return {
            "Authorization": f"Bearer {self._access_token()}",
            "Content-Type": "application/json",
        }

    def initiate(self, donation) -> Initiation:
        body = {
            "intent": "CAPTURE",
            "purchase_units": [
                {
                    "amount": {
                        "currency_code": self.currency,
                        "value": str(Decimal(donation.amount).quantize(Decimal("0.01"))),
                    },
                    "description": self.description,
                }
            ],
        }
        response = self._send("POST", "/v2/checkout/orders", json=body, headers=self._headers())
        order = self._expect_success(response, "create order")

        order_id = order.get("id")
        if not order_id:
            raise ProviderError(self.name, "order id missing from response")

        logger.info("PayPal order created", order_id=order_id, amount=body["purchase_units"][0]["amount"]["value"])
        return Initiation(external_ref=order_id, payload=order)

    def confirm(self, external_ref: str) -> str:
        response = self._send(
            "POST",
            f"/v2/checkout/orders/{external_ref}/capture",
            json={},
            headers=self._headers(),
        )
        if response.status_code >= 400:
            logger.info("PayPal capture rejected", order_id=external_ref, status_code=response.status_code)
            return FAILED

        result = self._json(response)
        status = COMPLETED if result.get("status") == "COMPLETED" else FAILED
        logger.info("PayPal capture", order_id=external_ref, provider_status=result.get("status"), status=status)
        return status
