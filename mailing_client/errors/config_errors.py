from typing import List, Optional

from mailing_client.errors.base import MailingError

class ConfigurationError(MailingError):
    """Excepción lanzada cuando la configuración del mailer falta o es inválida."""
    def __init__(
            self,
            message: str,
            missing_fields: Optional[List[str]] = None,
            environment: Optional[str] = None
        ):
        details = {"missing_fields": missing_fields}
        if environment is not None:
            details["environment"] = environment
        super().__init__(message=message, details=details)
