"""
Cliente de correo: reenvía peticiones de envío a un relay HTTP.
"""
from mailing_client.settings.version import __version__
from mailing_client.errors import MailingError, ConfigurationError, RenderError, MailTransportError
from mailing_client.schemas import Recipient, MailingRequest, MailerConfig
from mailing_client.mail import RelayClient, ViewRenderer, ViewParameters
from mailing_client.services import MailService
