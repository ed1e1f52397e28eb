from pydantic import BaseModel, StrictInt, StrictStr


# Missing fields decode to zero values and still reach the processor
class PaymentRequest(BaseModel):
    amount: StrictInt = 0  # smallest currency unit (ex: cents)
    currency: StrictStr = ""  # 3-letter ISO code (ex: "usd")


class SuccessResponse(BaseModel):
    clientSecret: str


class ErrorResponse(BaseModel):
    code: str
    message: str


class InvalidBodyResponse(BaseModel):
    error: str = "Invalid request body"
