from mailing_client.mail.connection import RelayClient
from mailing_client.mail.renderer import ViewRenderer, ViewParameters
