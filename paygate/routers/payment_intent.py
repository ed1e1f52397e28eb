# paygate/routers/payment_intent.py
from typing import Callable

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from paygate.config import Settings, get_settings
from paygate.schemas.payment_intent import ErrorResponse, PaymentRequest, SuccessResponse
from paygate.services.payment_intent import PaymentIntentError, PaymentIntentGateway
from paygate.services.stripe import PaymentProcessor, StripeProcessor

router = APIRouter()


async def read_payment_request(request: Request) -> PaymentRequest:
    """
    Decodes the body as JSON whatever the Content-Type says
    (browsers post a plain string body as text/plain).
    """
    body = await request.body()
    try:
        return PaymentRequest.model_validate_json(body)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False, include_context=False)) from e


def get_processor_factory() -> Callable[[str], PaymentProcessor]:
    return StripeProcessor


def get_gateway(
    settings: Settings = Depends(get_settings),
    processor_factory: Callable[[str], PaymentProcessor] = Depends(get_processor_factory),
) -> PaymentIntentGateway:
    return PaymentIntentGateway(settings.stripe_secret_key, processor_factory)


@router.post(
    "/create-payment-intent",
    response_model=SuccessResponse,
    responses={500: {"model": ErrorResponse}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": PaymentRequest.model_json_schema()}},
        }
    },
)
def create_payment_intent(
    data: PaymentRequest = Depends(read_payment_request),
    gateway: PaymentIntentGateway = Depends(get_gateway),
):
    # sync handler: FastAPI runs it in its threadpool, the Stripe call blocks
    try:
        return gateway.create_payment_intent(data.amount, data.currency)
    except PaymentIntentError as e:
        return JSONResponse(status_code=500, content=e.to_response().model_dump())
