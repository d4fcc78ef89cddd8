from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from charity_api.dependencies import get_donation_service, get_submission_service
from charity_api.schemas import ContactForm, DonationForm, SubscribeForm, VolunteerForm

router = APIRouter(prefix="/api")


@router.post("/contact", status_code=status.HTTP_201_CREATED)
def submit_contact(form: ContactForm, service=Depends(get_submission_service)):
    return service.submit_contact(form)


@router.post("/volunteer", status_code=status.HTTP_201_CREATED)
def submit_volunteer(form: VolunteerForm, service=Depends(get_submission_service)):
    return service.submit_volunteer(form)


@router.post("/subscribe", status_code=status.HTTP_201_CREATED)
def subscribe(form: SubscribeForm, service=Depends(get_submission_service)):
    return service.subscribe(form)


@router.post("/donate")
def donate(form: DonationForm, service=Depends(get_donation_service)):
    return service.submit(form)


# Called after the donor approves the order on PayPal
@router.post("/donate/paypal/capture/{order_id}")
def capture_paypal(order_id: str, service=Depends(get_donation_service)):
    if service.capture_paypal(order_id):
        return {"message": "Payment captured"}
    return JSONResponse(status_code=400, content={"error": "Capture failed"})


# Called by the gateway return/callback once the donor has paid
@router.get("/donate/gateway/verify/{tx_ref}")
def verify_gateway(tx_ref: str, service=Depends(get_donation_service)):
    if service.verify_gateway(tx_ref):
        return {"message": "Payment verified"}
    return JSONResponse(status_code=400, content={"error": "Verification failed"})
