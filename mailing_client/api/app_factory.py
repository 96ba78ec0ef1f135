"""
Registro del cliente de correo en la aplicación anfitriona (FastAPI)
"""
import logging
from typing import Optional
import httpx
from fastapi import FastAPI

from mailing_client.settings import MailingLogger, Settings, resolve_mailer_config
from mailing_client.services import MailService
from mailing_client.api.errors import register_error_handlers
from mailing_client.mail import RelayClient, ViewRenderer

logger = logging.getLogger("MailingClient")


def add_mailing_client(
        app: FastAPI,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> FastAPI:
    """
    Resuelve la configuración del entorno y registra el MailService en app.state.

    Si la configuración no se puede resolver no se registra nada y el error
    aborta el arranque.

    Args:
        app (FastAPI): Aplicación anfitriona.
        settings (Settings): Configuración del proceso.
        transport (Optional[httpx.AsyncBaseTransport]): Transporte httpx alternativo (tests).

    Returns:
        FastAPI: La misma aplicación, para encadenar.

    Raises:
        ConfigurationError: Si no existe la sección del entorno dentro de MAILER.
    """
    config = resolve_mailer_config(settings.MAILER, settings.ENVIRONMENT)

    renderer = ViewRenderer(template_dir=settings.MAIL_TEMPLATES_DIR)
    client = RelayClient(config=config, timeout=settings.MAIL_TIMEOUT, transport=transport)

    app.state.mailer_config = config
    app.state.mail_service = MailService(client, renderer, config, settings.MAIL_SITE_NAME)

    logger.info(
        f"Mailing client registered for {settings.ENVIRONMENT} "
        f"({'disabled' if config.disabled else config.send_url})"
    )
    return app


def create_app(settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> FastAPI:
    """
    Crea una aplicación FastAPI con el cliente de correo ya registrado.

    Args:
        settings (Settings): Las configuraciones de la aplicación.
        transport (Optional[httpx.AsyncBaseTransport]): Transporte httpx alternativo (tests).

    Returns:
        FastAPI: Instancia de la aplicación FastAPI configurada.
    """
    MailingLogger.setup_logging(level=settings.LOG_LEVEL, log_file=settings.LOG_FILE)

    app = FastAPI(
        title=settings.APP_NAME,
        description=f"{settings.APP_NAME} API",
        version=settings.APP_VERSION,
    )

    add_mailing_client(app, settings, transport=transport)

    # Handler de manejo de errores del cliente de correo
    register_error_handlers(app)

    return app
