from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Type
from pydantic import AliasChoices, Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    SettingsError,
)

from mailing_client.settings.version import __version__
from mailing_client.errors.config_errors import ConfigurationError


class Settings(BaseSettings):
    # Datos base
    APP_NAME: str = "MailingClient"
    APP_VERSION: str = __version__

    # Nombre del entorno de despliegue: selecciona la sección dentro de MAILER
    ENVIRONMENT: str = "Production"

    # Árbol "Mailer" (también MAILER): una sección por entorno con {Disabled, Host, Port}
    MAILER: Dict[str, Any] = Field(default_factory=dict, validation_alias=AliasChoices("Mailer", "MAILER"))

    # Mail
    MAIL_SITE_NAME: str = "PVSystem24.ru"
    MAIL_TIMEOUT: float = 10.0
    MAIL_TEMPLATES_DIR: Path = Path(__file__).parent.parent / "templates"

    # Logs
    LOG_LEVEL: str = "INFO"
    LOGS_PATH: Optional[Path] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        json_file="appsettings.json",
        case_sensitive=True,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
            cls,
            settings_cls: Type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,
            file_secret_settings: PydanticBaseSettingsSource,
        ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Añade appsettings.json como la fuente de menor prioridad."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            JsonConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    @property
    def LOG_FILE(self) -> Optional[Path]:
        if self.LOGS_PATH is None:
            return None
        return self.LOGS_PATH / f"{self.APP_NAME}.log"


def load_settings(**overrides: Any) -> Settings:
    """
    Instancia la configuración convirtiendo los errores de validación
    en un ConfigurationError que aborta el arranque.
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        invalid_fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise ConfigurationError(
            message=f"Invalid mailing client settings: {', '.join(invalid_fields)}",
            missing_fields=invalid_fields
        ) from e
    except SettingsError as e:
        # JSON mal formado en MAILER o en appsettings.json
        raise ConfigurationError(message=f"Unreadable mailing client settings: {e}") from e
