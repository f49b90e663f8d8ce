# config.py - environment-driven settings, built once at startup
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional
from dotenv import load_dotenv

load_dotenv()

REQUIRED_KEYS = (
    "RESEND_API_KEY",
    "STAFF_EMAIL",
    "MAILCHIMP_API_KEY",
    "MAILCHIMP_SERVER_PREFIX",
    "MAILCHIMP_LIST_ID",
)

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    resend_api_key: str
    staff_email: str
    mailchimp_api_key: str
    mailchimp_server_prefix: str
    mailchimp_list_id: str
    applications_from: str = "SCTC Applications <applications@yourdomain.com>"
    confirmation_from: str = "SCTC <no-reply@yourdomain.com>"
    webhook_url: Optional[str] = None
    webhook_timeout: float = 10.0
    site_url: str = "http://localhost:3000"
    verify_pdf_signature: bool = False
    log_level: str = "INFO"


def _flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in TRUTHY


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ

    for key in REQUIRED_KEYS:
        if not (env.get(key) or "").strip():
            raise RuntimeError(f"Set {key} in .env")

    log_level = (env.get("LOG_LEVEL") or Settings.log_level).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise RuntimeError("Set LOG_LEVEL in .env")

    return Settings(
        resend_api_key=env["RESEND_API_KEY"].strip(),
        staff_email=env["STAFF_EMAIL"].strip(),
        mailchimp_api_key=env["MAILCHIMP_API_KEY"].strip(),
        mailchimp_server_prefix=env["MAILCHIMP_SERVER_PREFIX"].strip(),
        mailchimp_list_id=env["MAILCHIMP_LIST_ID"].strip(),
        applications_from=env.get("APPLICATIONS_FROM") or Settings.applications_from,
        confirmation_from=env.get("CONFIRMATION_FROM") or Settings.confirmation_from,
        # blank means "no webhook"
        webhook_url=(env.get("WEBHOOK_URL") or "").strip() or None,
        webhook_timeout=float(env.get("WEBHOOK_TIMEOUT") or Settings.webhook_timeout),
        site_url=(env.get("SITE_URL") or Settings.site_url).rstrip("/"),
        verify_pdf_signature=_flag(env.get("VERIFY_PDF_SIGNATURE")),
        log_level=log_level,
    )
