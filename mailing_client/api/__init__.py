from mailing_client.api.app_factory import add_mailing_client, create_app
from mailing_client.api.dependencies import get_mail_service, get_mailer_config
from mailing_client.api.errors import register_error_handlers
