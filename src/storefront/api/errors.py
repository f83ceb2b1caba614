"""Map domain failures onto HTTP responses.

Protean's own handlers cover its exception family; the storefront adds its
auth and order-placement failures and renders validation errors as
``{"error": <messages>}``.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ValidationError
from protean.integrations.fastapi import register_exception_handlers

from storefront.identity.authentication import InvalidCredentials
from storefront.ordering.placement import OrderCreationFailed


async def validation_error_handler(_request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": exc.messages})


async def invalid_credentials_handler(_request: Request, exc: InvalidCredentials) -> JSONResponse:
    return JSONResponse(status_code=401, content={"error": str(exc)})


async def order_creation_failed_handler(_request: Request, exc: OrderCreationFailed) -> JSONResponse:
    cause = exc.__cause__
    return JSONResponse(
        status_code=500,
        content={"error": str(exc), "cause": str(cause) if cause else None},
    )


def register_error_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)
    # Registered after Protean's so these win for ValidationError.
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(InvalidCredentials, invalid_credentials_handler)
    app.add_exception_handler(OrderCreationFailed, order_creation_failed_handler)
