import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from mailing_client.api import add_mailing_client, create_app, get_mail_service, get_mailer_config
from mailing_client.errors import ConfigurationError, MailTransportError
from mailing_client.schemas import MailerConfig
from mailing_client.services import MailService
from mailing_client.settings import Settings

def make_settings(templates_dir, environment="Production"):
    return Settings(
        _env_file=None,
        ENVIRONMENT=environment,
        MAILER={"Production": {"Host": "m", "Port": 9000}},
        MAIL_SITE_NAME="example.org",
        MAIL_TEMPLATES_DIR=templates_dir,
    )

def test_registers_config_and_service(templates_dir):
    app = FastAPI()

    add_mailing_client(app, make_settings(templates_dir))

    assert app.state.mailer_config == MailerConfig(host="m", port=9000)
    assert isinstance(app.state.mail_service, MailService)
    assert app.state.mail_service.site_name == "example.org"

def test_missing_environment_section_registers_nothing(templates_dir):
    app = FastAPI()

    with pytest.raises(ConfigurationError):
        add_mailing_client(app, make_settings(templates_dir, environment="Staging"))

    assert not hasattr(app.state, "mail_service")
    assert not hasattr(app.state, "mailer_config")

def test_dependencies_send_through_registered_service(templates_dir, relay):
    app = create_app(make_settings(templates_dir), transport=relay.transport)

    @app.post("/welcome")
    async def welcome(
        mail_service: MailService = Depends(get_mail_service),
        config: MailerConfig = Depends(get_mailer_config)
    ):
        await mail_service.send_view_to("Alice", "a@x.com", "Hi", "welcome.html", {"name": "Alice"})
        return {"relay": config.send_url}

    response = TestClient(app).post("/welcome")

    assert response.status_code == 200
    assert response.json() == {"relay": "http://m:9000/Send"}
    assert relay.payloads()[0]["Body"] == "<p>Hola Alice</p>"
    assert relay.payloads()[0]["Subject"] == "Hi | example.org"

def test_mailing_errors_become_json_responses(templates_dir):
    app = create_app(make_settings(templates_dir))

    @app.get("/fail")
    async def fail():
        raise MailTransportError("Relay answered 503", url="http://m:9000/Send", status_code=503)

    response = TestClient(app).get("/fail")

    assert response.status_code == 502
    assert response.json() == {
        "status": "error",
        "code": "MailTransportError",
        "message": "Relay answered 503",
        "details": {"url": "http://m:9000/Send", "status_code": 503},
    }
