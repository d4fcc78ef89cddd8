import structlog

from charity_api.schemas import ContactForm, SubscribeForm, VolunteerForm

logger = structlog.get_logger()


class SubmissionService:
    """Contact, volunteer and newsletter forms: store the record, then email."""

    def __init__(self, store, notifier, settings):
        self.store = store
        self.notifier = notifier
        self.settings = settings

    def submit_contact(self, form: ContactForm):
        contact_id = self.store.insert("contact", form.model_dump())
        logger.info("Contact stored", contact_id=contact_id)

        self.notifier.send(
            self.settings.notify_email,
            f"New Contact: {form.subject}",
            f"From: {form.first_name} {form.last_name}\n"
            f"Email: {form.email}\n"
            f"Phone: {form.phone or ''}\n"
            f"Message: {form.message}",
        )
        return {"message": "Contact submitted successfully"}

    def submit_volunteer(self, form: VolunteerForm):
        fields = form.model_dump()
        fields["availability"] = fields["availability"] or []
        volunteer_id = self.store.insert("volunteer", fields)
        logger.info("Volunteer stored", volunteer_id=volunteer_id)

        self.notifier.send(
            self.settings.notify_email,
            "New Volunteer Application",
            f"Name: {form.full_name}\n"
            f"Email: {form.email}\n"
            f"Phone: {form.phone or ''}\n"
            f"Area: {form.preferred_area}\n"
            f"Skills: {form.skills or ''}\n"
            f"Availability: {', '.join(fields['availability'])}",
        )
        return {"message": "Volunteer application submitted"}

    def subscribe(self, form: SubscribeForm):
        subscriber_id = self.store.insert("subscriber", form.model_dump())
        logger.info("Subscriber stored", subscriber_id=subscriber_id)

        self.notifier.send(
            form.email,
            f"Welcome to {self.settings.org_name} Newsletter",
            "Thank you for subscribing! Stay tuned for updates.",
        )
        return {"message": "Subscribed successfully"}
