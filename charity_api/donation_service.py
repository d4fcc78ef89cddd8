import structlog

from charity_api.provider_base import COMPLETED
from charity_api.paypal_service import approve_link
from charity_api.schemas import DonationForm

logger = structlog.get_logger()

PENDING = "pending"
INTENT = "intent"
INITIATED = "initiated"
CREATED = "created"

# status a donation moves to once its provider accepted the initiation
INITIATED_STATES = {
    "gateway": INITIATED,
    "paypal": CREATED,
}

PROVIDER_LABELS = {
    "gateway": "Gateway",
    "paypal": "PayPal",
}


class DonationService:
    """Donation state machine.

    pending -> intent (bank) | initiated (gateway) | created (paypal) -> completed

    A submission is handled strictly in order: persist as pending, call the
    provider, record the new status and reference, notify, respond. A failure at
    any step propagates and leaves the earlier writes in place.
    """

    def __init__(self, store, notifier, providers: dict, settings):
        self.store = store
        self.notifier = notifier
        self.providers = providers
        self.settings = settings

    def submit(self, form: DonationForm) -> dict:
        fields = form.model_dump()
        fields["status"] = PENDING
        donation_id = self.store.insert("donation", fields)

        log = logger.bind(donation_id=donation_id, method=form.method)
        log.info("Donation stored", amount=str(form.amount), type=form.type)

        if form.method == "bank":
            return self._bank_intent(donation_id, form, log)
        return self._provider_payment(donation_id, form, log)

    def _bank_intent(self, donation_id, form, log):
        self._set_status(donation_id, INTENT)
        log.info("Donation status changed", status=INTENT)

        self.notifier.send(
            form.email,
            "Thank you for your donation intent",
            self.settings.bank_details,
        )
        return {"message": "Donation intent recorded. Please complete bank transfer."}

    def _provider_payment(self, donation_id, form, log):
        provider = self.providers[form.method]
        initiation = provider.initiate(form)

        status = INITIATED_STATES[form.method]
        self._set_status(donation_id, status, tx_ref=initiation.external_ref)
        log.info("Donation status changed", status=status, tx_ref=initiation.external_ref)

        label = PROVIDER_LABELS[form.method]
        ref_label = "Order ID" if form.method == "paypal" else "Tx Ref"
        self.notifier.send(
            self.settings.notify_email,
            f"New Donation Initiated ({label})",
            f"Amount: {form.amount} {provider.currency}\n"
            f"From: {form.full_name}\n"
            f"{ref_label}: {initiation.external_ref}",
        )

        if form.method == "paypal":
            return {"message": "PayPal order created", "approveUrl": approve_link(initiation.payload)}
        return {"message": "Payment initiated", "data": initiation.payload}

    def _set_status(self, donation_id, status, tx_ref=None):
        patch = {"status": status}
        if tx_ref is not None:
            patch["tx_ref"] = tx_ref
        return self.store.update_where("donation", {"id": donation_id}, patch)

    def confirm(self, method: str, external_ref: str) -> bool:
        """Finalize a gateway or PayPal payment by its external reference.

        Returns True only when the provider reports completion and a stored
        donation carries that reference. Otherwise the stored status is left
        as it was.
        """
        log = logger.bind(method=method, tx_ref=external_ref)

        status = self.providers[method].confirm(external_ref)
        if status != COMPLETED:
            log.info("Donation confirmation not completed", provider_status=status)
            return False

        count = self.store.update_where("donation", {"tx_ref": external_ref}, {"status": COMPLETED})
        if count == 0:
            log.warning("Confirmed payment has no matching donation")
            return False

        log.info("Donation completed", updated=count)
        return True

    def capture_paypal(self, order_id: str) -> bool:
        return self.confirm("paypal", order_id)

    def verify_gateway(self, tx_ref: str) -> bool:
        return self.confirm("gateway", tx_ref)
