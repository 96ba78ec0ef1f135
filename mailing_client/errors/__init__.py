from mailing_client.errors.base import (
    MailingError,
    RenderError,
    MailTransportError
)
from mailing_client.errors.config_errors import ConfigurationError
