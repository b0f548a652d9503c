"""HTTP mapping for checkout errors.

Validation and not-found errors are mapped by Protean's own FastAPI handlers;
these cover the storefront's checkout errors.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from storefront.exceptions import (
    CheckoutInProgressError,
    PaymentCollaboratorError,
    RegistrationRequiredError,
)


async def registration_required_handler(request: Request, exc: RegistrationRequiredError) -> JSONResponse:
    return JSONResponse(
        status_code=409,
        content={
            "error": str(exc),
            "pending_item_ids": exc.pending_item_ids,
            "next_action": exc.next_action.to_dict(),
        },
    )


async def checkout_in_progress_handler(request: Request, exc: CheckoutInProgressError) -> JSONResponse:
    return JSONResponse(status_code=409, content={"error": str(exc)})


async def payment_collaborator_handler(request: Request, exc: PaymentCollaboratorError) -> JSONResponse:
    return JSONResponse(status_code=502, content={"error": str(exc), "retryable": exc.retryable})


def register_checkout_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RegistrationRequiredError, registration_required_handler)
    app.add_exception_handler(CheckoutInProgressError, checkout_in_progress_handler)
    app.add_exception_handler(PaymentCollaboratorError, payment_collaborator_handler)
