from mailing_client.schemas.mailing_schemas import Recipient, MailingRequest, MailerConfig
