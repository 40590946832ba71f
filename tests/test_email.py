import smtplib

import pytest

from app.core import email as email_module
from app.core.config import Settings
from app.core.email import EmailNotifier
from app.core.errors import DeliveryError


class FakeSMTP:
    instances = []

    def __init__(self, host, port, timeout=None):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.calls = []
        self.messages = []
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def starttls(self):
        self.calls.append("starttls")

    def login(self, user, password):
        self.calls.append(("login", user, password))

    def send_message(self, msg):
        self.messages.append(msg)


@pytest.fixture(autouse=True)
def fake_smtp(monkeypatch):
    FakeSMTP.instances = []
    monkeypatch.setattr(email_module.smtplib, "SMTP", FakeSMTP)
    return FakeSMTP


def test_send_builds_html_message():
    settings = Settings(
        jwt_secret_key="s",
        smtp_host="mail.test",
        smtp_port=2525,
        smtp_user="user",
        smtp_pass="pass",
    )
    EmailNotifier(settings).send("a@x.com", "Password Reset Request", "<p>hi</p>")

    server = FakeSMTP.instances[0]
    assert (server.host, server.port) == ("mail.test", 2525)
    assert server.calls == ["starttls", ("login", "user", "pass")]
    msg = server.messages[0]
    assert msg["To"] == "a@x.com"
    assert msg["From"] == "Auth System <auth@example.com>"
    assert msg["Subject"] == "Password Reset Request"
    assert "<p>hi</p>" in msg.get_body(preferencelist=("html",)).get_content()


def test_send_skips_login_without_credentials():
    settings = Settings(jwt_secret_key="s", smtp_host="mail.test", smtp_starttls=False)
    EmailNotifier(settings).send("a@x.com", "subject", "<p>hi</p>")
    assert FakeSMTP.instances[0].calls == []


def test_smtp_failure_becomes_delivery_error(monkeypatch):
    def refuse(self, msg):
        raise smtplib.SMTPRecipientsRefused({"a@x.com": (550, b"no such user")})

    monkeypatch.setattr(FakeSMTP, "send_message", refuse)
    settings = Settings(jwt_secret_key="s", smtp_host="mail.test")
    with pytest.raises(DeliveryError):
        EmailNotifier(settings).send("a@x.com", "subject", "<p>hi</p>")


def test_missing_host_is_a_delivery_error():
    settings = Settings(jwt_secret_key="s", smtp_host=None)
    with pytest.raises(DeliveryError):
        EmailNotifier(settings).send("a@x.com", "subject", "<p>hi</p>")
    assert FakeSMTP.instances == []
