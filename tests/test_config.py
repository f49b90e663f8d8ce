import pytest

from config import load_settings

BASE = {
    "RESEND_API_KEY": "re_x",
    "STAFF_EMAIL": "staff@sctc.test",
    "MAILCHIMP_API_KEY": "mc_x",
    "MAILCHIMP_SERVER_PREFIX": "us21",
    "MAILCHIMP_LIST_ID": "list",
}


def test_defaults():
    settings = load_settings(dict(BASE))
    assert settings.webhook_url is None
    assert settings.site_url == "http://localhost:3000"
    assert settings.verify_pdf_signature is False
    assert settings.log_level == "INFO"


def test_optional_values():
    env = dict(BASE, WEBHOOK_URL="https://hooks.example/x", SITE_URL="https://sctc.example/",
               VERIFY_PDF_SIGNATURE="Yes", WEBHOOK_TIMEOUT="2.5", LOG_LEVEL="debug")
    settings = load_settings(env)
    assert settings.webhook_url == "https://hooks.example/x"
    assert settings.site_url == "https://sctc.example"
    assert settings.verify_pdf_signature is True
    assert settings.webhook_timeout == 2.5
    assert settings.log_level == "DEBUG"


def test_blank_webhook_means_none():
    assert load_settings(dict(BASE, WEBHOOK_URL="  ")).webhook_url is None


@pytest.mark.parametrize("key", sorted(BASE))
def test_missing_required_key(key):
    env = dict(BASE)
    env[key] = ""
    with pytest.raises(RuntimeError, match=f"Set {key} in .env"):
        load_settings(env)


def test_unknown_log_level():
    with pytest.raises(RuntimeError, match="Set LOG_LEVEL in .env"):
        load_settings(dict(BASE, LOG_LEVEL="verbose"))
