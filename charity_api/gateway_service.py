import time

import structlog

from charity_api.provider_base import COMPLETED, FAILED, Initiation, PaymentProvider

logger = structlog.get_logger()


def make_tx_ref() -> str:
    return f"KG-{int(time.time() * 1000)}"


class GatewayService(PaymentProvider):
    """Mobile-money / card gateway: multipart charge + verify by tx_ref."""

    name = "gateway"

    def __init__(self, base_url, secret_key, currency="ETB", charge_type="telebirr", client=None, timeout=30.0):
        super().__init__(base_url, client=client, timeout=timeout)
        self.secret_key = secret_key
        self.currency = currency
        self.charge_type = charge_type

    @classmethod
    def from_settings(cls, settings, client=None):
        return cls(
            base_url=settings.gateway_base_url,
            secret_key=settings.gateway_secret_key,
            currency=settings.gateway_currency,
            charge_type=settings.gateway_charge_type,
            client=client,
            timeout=settings.provider_timeout_seconds,
        )

    @property
    def _auth_headers(self):
        return {"Authorization": f"Bearer {self.secret_key}"}

    def initiate(self, donation) -> Initiation:
        tx_ref = make_tx_ref()
        # (None, value) parts are sent as plain form fields, no filename
        form = {
            "amount": (None, str(donation.amount)),
            "currency": (None, self.currency),
            "tx_ref": (None, tx_ref),
            "mobile": (None, donation.phone),
        }

        response = self._send(
            "POST",
            "/charges",
            params={"type": self.charge_type},
            files=form,
            headers=self._auth_headers,
        )
        data = self._expect_success(response, "charge")

        logger.info("Gateway charge initiated", tx_ref=tx_ref, amount=str(donation.amount))
        return Initiation(external_ref=tx_ref, payload=data)

    def confirm(self, external_ref: str) -> str:
        response = self._send(
            "GET",
            f"/transaction/verify/{external_ref}",
            headers=self._auth_headers,
        )
        if response.status_code >= 400:
            logger.info("Gateway verify rejected", tx_ref=external_ref, status_code=response.status_code)
            return FAILED

        data = self._json(response)
        status = COMPLETED if data.get("status") == "success" else FAILED
        logger.info("Gateway verify", tx_ref=external_ref, provider_status=data.get("status"), status=status)
        return status
