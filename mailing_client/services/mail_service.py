import logging
from datetime import datetime
from typing import Any, Iterable, Mapping, Optional, Union

from mailing_client.schemas import MailerConfig, MailingRequest, Recipient
from mailing_client.mail import RelayClient, ViewRenderer, ViewParameters

Parameters = Union[ViewParameters, Mapping[str, Any], None]

class MailService:
    """Orquestador de alto nivel para el envío de correos a través del relay."""

    def __init__(
            self,
            client: RelayClient,
            renderer: ViewRenderer,
            config: MailerConfig,
            site_name: str
        ) -> None:
        """Inyecta las dependencias necesarias.

        Args:
            client (RelayClient): Envío HTTP hacia el relay.
            renderer (ViewRenderer): Renderizador de vistas Jinja2.
            config (MailerConfig): Configuración del entorno actual.
            site_name (str): Identificador del sitio que se añade a cada asunto.
        """
        self.client = client
        self.renderer = renderer
        self.config = config
        self.site_name = site_name
        self.logger = logging.getLogger(self.__class__.__name__)

    async def send(
            self,
            recipients: Iterable[Recipient],
            subject: str,
            body: str,
            offset: Optional[datetime] = None
        ) -> None:
        """Envía un cuerpo ya construido a una lista de destinatarios.

        Sin destinatarios, o con el mailer deshabilitado, no se contacta el relay.

        Args:
            recipients (Iterable[Recipient]): Destinatarios, en orden.
            subject (str): Asunto sin sufijo.
            body (str): Cuerpo HTML o texto plano.
            offset (Optional[datetime]): Envío programado, con zona horaria.

        Raises:
            MailTransportError: Si el relay no es alcanzable o no responde 2xx.
        """
        recipients = list(recipients)
        joined_emails = ", ".join(recipient.email for recipient in recipients)
        if not joined_emails:
            self.logger.warning(
                f"Requested mail is ignored due to empty recipients (subject: {subject}) (body: {body})"
            )
            return
        if self.config.disabled:
            self.logger.info(f"[Disabled] Requesting email to {joined_emails}")
            return

        self.logger.info(f"Requesting email to {joined_emails}")
        request = MailingRequest(
            recipients=recipients,
            subject=f"{subject} | {self.site_name}",
            body=body,
            offset=offset
        )
        await self.client.send_request(request)

    async def send_to(
            self,
            name: Optional[str],
            email: str,
            subject: str,
            body: str,
            offset: Optional[datetime] = None
        ) -> None:
        """Envía a un único destinatario."""
        await self.send([Recipient(name=name, email=email)], subject, body, offset)

    async def send_view(
            self,
            recipients: Iterable[Recipient],
            subject: str,
            view: str,
            parameters: Parameters = None,
            offset: Optional[datetime] = None
        ) -> None:
        """Renderiza una vista y envía el HTML resultante.

        Args:
            recipients (Iterable[Recipient]): Destinatarios, en orden.
            subject (str): Asunto sin sufijo.
            view (str): Nombre de la plantilla en el directorio de vistas.
            parameters (Parameters): ViewParameters, un diccionario o None.
            offset (Optional[datetime]): Envío programado, con zona horaria.

        Raises:
            RenderError: Si la vista no se puede renderizar; no se envía nada.
        """
        body = await self.renderer.render(view, ViewParameters.coerce(parameters))
        await self.send(recipients, subject, body, offset)

    async def send_view_to(
            self,
            name: Optional[str],
            email: str,
            subject: str,
            view: str,
            parameters: Parameters = None,
            offset: Optional[datetime] = None
        ) -> None:
        await self.send_view([Recipient(name=name, email=email)], subject, view, parameters, offset)
