from functools import lru_cache

from fastapi import Depends

from charity_api.config import get_settings
from charity_api.database import SessionLocal
from charity_api.donation_service import DonationService
from charity_api.gateway_service import GatewayService
from charity_api.notifications import EmailNotifier
from charity_api.paypal_service import PayPalService
from charity_api.store import RecordStore
from charity_api.submissions import SubmissionService


def get_store():
    return RecordStore(SessionLocal)


def get_notifier():
    return EmailNotifier.from_settings(get_settings())


@lru_cache
def get_providers():
    settings = get_settings()
    return {
        "gateway": GatewayService.from_settings(settings),
        "paypal": PayPalService.from_settings(settings),
    }


def get_submission_service(
    store=Depends(get_store),
    notifier=Depends(get_notifier),
):
    return SubmissionService(store, notifier, get_settings())


def get_donation_service(
    store=Depends(get_store),
    notifier=Depends(get_notifier),
    providers=Depends(get_providers),
):
    return DonationService(store, notifier, providers, get_settings())
