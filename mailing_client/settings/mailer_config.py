"""
Resolución de la configuración del mailer para el entorno de despliegue actual.
"""
import logging
from typing import Any, Mapping, Optional
from pydantic import ValidationError

from mailing_client.schemas import MailerConfig
from mailing_client.errors import ConfigurationError

logger = logging.getLogger("MailerConfig")


def resolve_mailer_config(mailer: Optional[Mapping[str, Any]], environment: str) -> MailerConfig:
    """
    Busca dentro del árbol "Mailer" la sección cuyo nombre coincide exactamente
    con el entorno y la convierte en un MailerConfig.

    Args:
        mailer (Optional[Mapping[str, Any]]): Árbol con una sección por entorno.
        environment (str): Nombre del entorno de despliegue.

    Returns:
        MailerConfig: Configuración inmutable del entorno.

    Raises:
        ConfigurationError: Si no existe la sección o sus valores no son válidos.
    """
    section = (mailer or {}).get(environment)
    if not isinstance(section, Mapping):
        raise ConfigurationError(
            message=f"Section {environment} not found inside Mailer section",
            environment=environment
        )

    # El enlace de claves no distingue mayúsculas: "Host" y "host" son el mismo campo
    values = {str(key).lower(): value for key, value in section.items()}
    try:
        config = MailerConfig.model_validate(values)
    except ValidationError as e:
        invalid_fields = [str(err["loc"][0]) for err in e.errors()]
        raise ConfigurationError(
            message=f"Invalid values in Mailer section {environment}: {', '.join(invalid_fields)}",
            missing_fields=invalid_fields,
            environment=environment
        ) from e

    logger.debug(f"Mailer section {environment} resolved (disabled={config.disabled})")
    return config
