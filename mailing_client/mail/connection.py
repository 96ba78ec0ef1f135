import httpx
import logging
from typing import Optional

from mailing_client.errors import MailTransportError
from mailing_client.schemas import MailerConfig, MailingRequest

class RelayClient:
    """Maneja el envío HTTP de peticiones de correo hacia el relay."""

    def __init__(
            self,
            config: MailerConfig,
            timeout: float,
            transport: Optional[httpx.AsyncBaseTransport] = None
        ) -> None:
        """
        Inicializa los parámetros de conexión.

        Args:
            config (MailerConfig): Host y puerto del relay.
            timeout (float): Límite en segundos para cada POST.
            transport (Optional[httpx.AsyncBaseTransport]): Transporte httpx alternativo (tests).
        """
        self.config = config
        self.timeout = timeout
        self._transport = transport
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def url(self) -> str:
        return self.config.send_url

    async def send_request(self, request: MailingRequest) -> httpx.Response:
        """
        Envía una petición ya construida como JSON.

        Cada envío abre su propio cliente HTTP, así los envíos concurrentes no comparten estado.

        Args:
            request (MailingRequest): Petición a serializar.

        Returns:
            httpx.Response: Respuesta del relay (2xx).

        Raises:
            MailTransportError: Fallo de red, timeout o respuesta no exitosa.
        """
        content = request.to_json()
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                self.logger.debug(f"POST {self.url}")
                response = await client.post(
                    self.url,
                    content=content,
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
                return response
        except httpx.HTTPStatusError as e:
            self.logger.error(f"Relay answered {e.response.status_code} for {self.url}")
            raise MailTransportError(
                f"Relay answered {e.response.status_code}",
                url=self.url,
                status_code=e.response.status_code
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self.logger.error(f"Error contacting relay {self.url}: {e}")
            raise MailTransportError(f"Error contacting relay: {e}", url=self.url) from e
