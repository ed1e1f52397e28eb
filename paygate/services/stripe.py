# paygate/services/stripe.py
from typing import Protocol, Sequence

import stripe


class ProcessorError(Exception):
    """
    Failure reported by the processor itself, with its own error code.
    """

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class ProcessorFailure(Exception):
    """Processor failure without an error code (auth, rate limit, network)."""


class PaymentProcessor(Protocol):
    def create_intent(self, amount: int, currency: str, method_types: Sequence[str]) -> str:
        """Creates a payment intent and returns its client secret."""
        ...


class StripeProcessor:
    def __init__(self, api_key: str):
        self.api_key = api_key

    def create_intent(self, amount: int, currency: str, method_types: Sequence[str]) -> str:
        try:
            # api_key per call: stripe.api_key (global) is never touched
            intent = stripe.PaymentIntent.create(
                api_key=self.api_key,
                amount=amount,
                currency=currency,
                payment_method_types=list(method_types),
            )
        except stripe.StripeError as e:
            # user_message has no "Request req_...: " prefix, unlike str(e)
            message = e.user_message or str(e)
            if not e.code:
                raise ProcessorFailure(message) from e
            raise ProcessorError(e.code, message) from e
        return intent.client_secret
