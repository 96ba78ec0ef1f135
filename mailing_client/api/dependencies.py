"""
Dependencias para inyectar en la API anfitriona
"""
from fastapi import Request

from mailing_client.schemas import MailerConfig
from mailing_client.services import MailService

# ============ Proveedores de Servicios ============
def get_mailer_config(request: Request) -> MailerConfig:
    """Provee la configuración del mailer resuelta al arrancar."""
    return request.app.state.mailer_config

def get_mail_service(request: Request) -> MailService:
    """
    Provee el MailService registrado por add_mailing_client.

    Args:
        request (Request): Petición en curso.

    Returns:
        MailService: Servicio de envío compartido por la aplicación.
    """
    return request.app.state.mail_service
