from mailing_client.settings.app_settings import Settings, load_settings
from mailing_client.settings.log_settings import MailingLogger
from mailing_client.settings.mailer_config import resolve_mailer_config
