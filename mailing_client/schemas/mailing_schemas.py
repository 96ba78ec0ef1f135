from typing import List, Optional
from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

class Recipient(BaseModel):
    """
    Destinatario de un correo. Se identifica por su email; no se eliminan duplicados.

    Args:
        name (Optional[str]): Nombre visible del destinatario.
        email (str): Dirección de correo electrónico.
    """
    name: Optional[str] = Field(None, alias="Name")
    email: str = Field(..., alias="Email")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

class MailingRequest(BaseModel):
    """
    Petición de envío que se serializa hacia el relay.

    Los alias son los nombres de campo que espera el relay (incluida la grafía "Recepients").

    Args:
        recipients (List[Recipient]): Destinatarios, en el orden recibido.
        subject (str): Asunto ya con el sufijo del sitio.
        body (str): Cuerpo HTML o texto plano.
        offset (Optional[AwareDatetime]): Momento programado de envío, con zona horaria.
    """
    recipients: List[Recipient] = Field(..., alias="Recepients")
    subject: str = Field(..., alias="Subject")
    body: str = Field(..., alias="Body")
    offset: Optional[AwareDatetime] = Field(None, alias="Offset")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_json(self) -> str:
        """Serializa la petición con los nombres de campo del relay."""
        return self.model_dump_json(by_alias=True)

class MailerConfig(BaseModel):
    """
    Configuración del mailer para un entorno concreto.

    Los campos ausentes toman su valor cero (False, "", 0).

    Args:
        disabled (bool): Si es True los envíos solo se registran en el log.
        host (str): Host del relay.
        port (int): Puerto del relay.
    """
    disabled: bool = False
    host: str = ""
    port: int = 0

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def send_url(self) -> str:
        return f"http://{self.host}:{self.port}/Send"
