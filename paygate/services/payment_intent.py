# paygate/services/payment_intent.py
import logging
from typing import Callable, Optional

from paygate.schemas.payment_intent import ErrorResponse, SuccessResponse
from paygate.services.stripe import PaymentProcessor, ProcessorError, StripeProcessor

logger = logging.getLogger("paygate.payment_intent")

# order matters: forwarded as is to the processor
ACCEPTED_PAYMENT_METHOD_TYPES = ("card", "twint")

MISSING_SECRET_KEY = "missing_secret_key"
CREATION_FAILED = "payment_intent_creation_failed"


class PaymentIntentError(Exception):
    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(code=self.code, message=self.message)


class PaymentIntentGateway:
    """
    Single pass-through to the processor: one call per request, no retry.

    The secret key is injected at construction; the processor is only built
    (and called) once a key is known to be present.
    """

    def __init__(
        self,
        secret_key: Optional[str],
        processor_factory: Callable[[str], PaymentProcessor] = StripeProcessor,
    ):
        self.secret_key = secret_key
        self.processor_factory = processor_factory

    def create_payment_intent(self, amount: int, currency: str) -> SuccessResponse:
        if not self.secret_key:
            logger.warning("STRIPE_SECRET_KEY is not configured, refusing to create payment intent")
            raise PaymentIntentError(
                MISSING_SECRET_KEY, "missing STRIPE_SECRET_KEY in environment variables"
            )

        processor = self.processor_factory(self.secret_key)
        try:
            client_secret = processor.create_intent(
                amount, currency, list(ACCEPTED_PAYMENT_METHOD_TYPES)
            )
        except ProcessorError as e:
            logger.warning(f"Processor rejected payment intent: {e.code} ({e.message})")
            raise PaymentIntentError(e.code, e.message) from e
        except Exception as e:
            logger.warning(f"Payment intent creation failed: {e}")
            raise PaymentIntentError(CREATION_FAILED, str(e)) from e

        logger.debug(f"Payment intent created: amount={amount} currency={currency}")
        return SuccessResponse(clientSecret=client_secret)
