from mailing_client.services.mail_service import MailService
