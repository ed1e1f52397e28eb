# paygate/main.py
import logging
import time
from typing import List

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from paygate.config import Settings, get_settings
from paygate.routers.payment_intent import router as payment_intent_router
from paygate.schemas.payment_intent import InvalidBodyResponse

DEV_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]

logger = logging.getLogger("paygate")


def allowed_origins(settings: Settings) -> List[str]:
    """
    Browser origins allowed to call the API.

    Local frontends are added only when DEBUG is on; otherwise CORS_ORIGINS
    is taken as is (empty means browsers are blocked).
    """
    if settings.debug:
        return list(dict.fromkeys(DEV_ORIGINS + settings.cors_origins))
    return list(settings.cors_origins)


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    if not debug:
        # one line per request is too chatty outside of dev
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


settings = get_settings()
configure_logging(settings.debug)
ALLOW_ORIGINS = allowed_origins(settings)

app = FastAPI(
    title="PayGate API",
    description="Creates Stripe payment intents and hands back their client secret",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception(f"{request.method} {request.url.path} crashed")
        raise
    elapsed_ms = round((time.perf_counter() - started) * 1000, 1)
    logger.debug(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms} ms)")
    return response


# Malformed JSON and wrong field types both land here, before the gateway runs
@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content=InvalidBodyResponse().model_dump())


app.include_router(payment_intent_router)


@app.on_event("startup")
async def on_startup():
    logger.info(f"PayGate API up (debug={settings.debug})")
    if not settings.stripe_secret_key:
        logger.warning("STRIPE_SECRET_KEY is not set, every payment intent request will fail")
    if ALLOW_ORIGINS:
        logger.info(f"CORS origins: {', '.join(ALLOW_ORIGINS)}")
    else:
        logger.info("CORS origins: none, browser calls will be refused")


@app.on_event("shutdown")
async def on_shutdown():
    logger.info("PayGate API stopped")


@app.get("/")
def root():
    return {"message": "Server is up and running!"}


@app.get("/health")
def health():
    return {"status": "ok"}


def run():
    logger.info(f"Server is starting on port {settings.port}...")
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
