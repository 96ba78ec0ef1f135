import json
import httpx
import pytest

from mailing_client.schemas import MailerConfig
from mailing_client.mail import RelayClient, ViewRenderer
from mailing_client.services import MailService

SITE_NAME = "example.org"

@pytest.fixture
def templates_dir(tmp_path):
    """Directorio temporal con vistas de prueba."""
    views = tmp_path / "views"
    views.mkdir()
    (views / "static.html").write_text("<p>Bienvenido</p>", encoding="utf-8")
    (views / "welcome.html").write_text("<p>Hola {{ name }}</p>", encoding="utf-8")
    (views / "invoice.html").write_text(
        "<h1>Factura {{ number }}</h1><p>Total: {{ total }}</p>", encoding="utf-8"
    )
    (views / "optional.html").write_text(
        "<p>{% if name is defined %}Hola {{ name }}{% else %}Hola{% endif %}</p>", encoding="utf-8"
    )
    (views / "broken.html").write_text("<p>{% if %}</p>", encoding="utf-8")
    return views

@pytest.fixture
def renderer(templates_dir):
    view_renderer = ViewRenderer(template_dir=templates_dir)
    yield view_renderer
    view_renderer.close()

@pytest.fixture
def relay():
    """Transporte httpx falso que guarda cada petición recibida."""
    class FakeRelay:
        def __init__(self):
            self.requests = []
            self.status_code = 202

        def handler(self, request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return httpx.Response(self.status_code, json={"status": "accepted"})

        @property
        def transport(self) -> httpx.MockTransport:
            return httpx.MockTransport(self.handler)

        def payloads(self):
            return [json.loads(request.content) for request in self.requests]

    return FakeRelay()

@pytest.fixture
def make_service(renderer, relay):
    """Fabrica un MailService apuntando al relay falso."""
    def _make(disabled: bool = False, host: str = "m", port: int = 9000) -> MailService:
        config = MailerConfig(disabled=disabled, host=host, port=port)
        client = RelayClient(config=config, timeout=5.0, transport=relay.transport)
        return MailService(client, renderer, config, SITE_NAME)
    return _make
