import logging
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from mailing_client.errors import (
    MailingError,
    ConfigurationError,
    RenderError,
    MailTransportError
)

def register_error_handlers(app: FastAPI):
    """
    Registra los manejadores de excepciones del cliente de correo.
    """

    @app.exception_handler(MailingError)
    async def mailing_error_handler(request: Request, exc: MailingError):
        error_mapping = {
            ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
            RenderError: status.HTTP_500_INTERNAL_SERVER_ERROR,
            MailTransportError: status.HTTP_502_BAD_GATEWAY,
        }
        http_status = error_mapping.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

        logger = logging.getLogger("MailingClient")
        logger.error(f"{exc.__class__.__name__} while handling {request.url.path}: {exc.message}")

        return JSONResponse(
            status_code=http_status,
            content={
                "status": "error",
                "code": exc.__class__.__name__,
                "message": exc.message,
                "details": exc.details or {}
            },
        )
