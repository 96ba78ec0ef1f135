from typing import Any, Dict, Optional

class MailingError(Exception):
    """Base para todos los errores del cliente de correo."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

class RenderError(MailingError):
    """Cuando una vista no existe o sus parámetros no encajan con la plantilla."""
    def __init__(self, message: str, view: Optional[str] = None):
        super().__init__(message=message, details={"view": view})

class MailTransportError(MailingError):
    """Fallo de red o respuesta no exitosa del servicio de envío (relay)."""
    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        details: Dict[str, Any] = {"url": url}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message=message, details=details)
