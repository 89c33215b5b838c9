# backend/backoffice/main.py

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from sqlalchemy.exc import TimeoutError as SA_TimeoutError

from . import models  # noqa: F401  registers tables on Base.metadata
from .api import (
    api_budget,
    api_client,
    api_distance,
    api_job,
    api_operations,
    api_settings,
    api_team,
    api_travel_pricing,
)
from .core.config import settings
from .core.observability import setup_logging
from .database import Base, engine
from .middleware.security_headers import SecurityHeadersMiddleware
from .utils.errors import BackofficeError

# Configure logging before creating any loggers
setup_logging()
logger = logging.getLogger(__name__)

Base.metadata.create_all(bind=engine)

app = FastAPI(title="Back Office API", default_response_class=ORJSONResponse)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
logger.info("CORS origins set to: %s", settings.CORS_ORIGINS)
app.add_middleware(SecurityHeadersMiddleware)


@app.middleware("http")
async def catch_exceptions(request: Request, call_next):
    """Turn anything the handlers did not map into a JSON 500."""
    try:
        response = await call_next(request)
    except SA_TimeoutError as exc:  # DB pool exhausted
        logger.error("DB timeout at %s: %s", request.url.path, str(exc))
        response = ORJSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"error": "Banco de dados ocupado, tente novamente"},
        )
    except Exception as exc:
        logger.exception("Unhandled error at %s: %s", request.url.path, exc)
        response = ORJSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Erro interno do servidor", "detail": str(exc)},
        )
    return response


@app.exception_handler(BackofficeError)
async def backoffice_error_handler(request: Request, exc: BackofficeError):
    if exc.status_code >= 500:
        logger.error("%s at %s: %s", type(exc).__name__, request.url.path, exc.message)
    else:
        logger.warning(
            "%s %s at %s: %s", type(exc).__name__, exc.status_code, request.url.path, exc.message
        )
    return ORJSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Render body validation failures as field-level issues."""
    field_errors: dict[str, list[str]] = {}
    form_errors: list[str] = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        message = err.get("msg", "Valor inválido")
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        if loc:
            field_errors.setdefault(".".join(loc), []).append(message)
        else:
            form_errors.append(message)
    logger.warning("Validation error at %s: %s", request.url.path, exc.errors())
    return ORJSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Dados inválidos",
            "issues": {"fieldErrors": field_errors, "formErrors": form_errors},
        },
    )


@app.get("/healthz", tags=["health"])
def healthz():
    return {"status": "ok"}


api_prefix = settings.API_PREFIX.rstrip("/")

for router in (
    api_distance.router,
    api_travel_pricing.router,
    api_settings.router,
    api_client.router,
    api_team.router,
    api_budget.router,
    api_job.router,
    api_operations.router,
):
    app.include_router(router, prefix=api_prefix)
