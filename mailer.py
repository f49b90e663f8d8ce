# mailer.py - transactional email via Resend, HTML bodies rendered with Jinja2
import logging
import os
from typing import List

import resend
from jinja2 import Environment, FileSystemLoader, select_autoescape

from config import Settings
from models import ApplicationSubmission, Attachment
from processor import format_file_size

logger = logging.getLogger("sctc-mailer")

TEMPLATES = Environment(
    loader=FileSystemLoader(os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")),
    autoescape=select_autoescape(["html"]),
)

STAFF_SUBJECT = "New Internship Application — {name}"
CONFIRMATION_SUBJECT = "Application Received — South Central Training Consortium"


def render_email(template: str, **context) -> str:
    return TEMPLATES.get_template(template).render(**context)


def format_submitted(submission: ApplicationSubmission) -> str:
    when = submission.submitted_at
    return f"{when:%A, %B} {when.day}, {when:%Y at %I:%M %p %Z}"


class ResendMailer:
    """Thin wrapper over the Resend SDK. Provider errors propagate to the caller."""

    def __init__(self, api_key: str):
        self.api_key = api_key

    def send(self, message: dict) -> dict:
        # the SDK only reads its key from module state
        resend.api_key = self.api_key
        logger.info("Sending '%s' to %s", message.get("subject"), message.get("to"))
        return resend.Emails.send(message)


def build_staff_notification(
    submission: ApplicationSubmission, attachments: List[Attachment], settings: Settings
) -> dict:
    html = render_email(
        "email/staff_notification.html",
        applicant_name=submission.applicant_name,
        applicant_email=submission.applicant_email,
        submitted=format_submitted(submission),
        documents=[
            {"label": doc.slot.staff_label, "filename": doc.filename, "size": format_file_size(doc.size)}
            for doc in submission.documents
        ],
    )
    return {
        "from": settings.applications_from,
        "to": [settings.staff_email],
        "subject": STAFF_SUBJECT.format(name=submission.applicant_name),
        "html": html,
        "reply_to": submission.applicant_email,
        "attachments": [
            {"filename": a.filename, "content": a.content, "content_type": a.content_type}
            for a in attachments
        ],
    }


def build_confirmation(submission: ApplicationSubmission, settings: Settings) -> dict:
    html = render_email(
        "email/confirmation.html",
        applicant_name=submission.applicant_name,
        documents=[doc.slot.staff_label for doc in submission.documents],
        field_notes_url=f"{settings.site_url}/#field-notes",
        staff_email=settings.staff_email,
    )
    return {
        "from": settings.confirmation_from,
        "to": [submission.applicant_email],
        "subject": CONFIRMATION_SUBJECT,
        "html": html,
        "reply_to": settings.staff_email,
    }
