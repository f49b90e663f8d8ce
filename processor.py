# processor.py - turns an uploaded application into validated documents and email attachments
import asyncio
import re
from typing import Dict, List, Mapping, Optional

from models import (
    DOCUMENT_SLOTS,
    MAX_FILE_SIZE,
    PDF_CONTENT_TYPE,
    ApplicationDocument,
    ApplicationSubmission,
    Attachment,
)

PDF_SIGNATURE = b"%PDF-"

WEBHOOK_DOCUMENTS = [slot.applicant_label for slot in DOCUMENT_SLOTS]


class SubmissionError(ValueError):
    """Client-side problem with an application; the message is safe to show."""


def normalize_content_type(content_type: Optional[str]) -> str:
    return (content_type or "").split(";", 1)[0].strip().lower()


def format_file_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def check_document(filename: str, size: int, content_type: Optional[str], head: Optional[bytes] = None) -> None:
    """
    Size and type rules shared by the server and the upload form.

    `head` is only passed when signature checking is enabled; the declared
    content type is trusted otherwise.
    """
    if size > MAX_FILE_SIZE:
        raise SubmissionError(f'File "{filename}" exceeds the 10MB limit.')
    if normalize_content_type(content_type) != PDF_CONTENT_TYPE:
        raise SubmissionError(f'File "{filename}" must be a PDF.')
    if head is not None and not head.startswith(PDF_SIGNATURE):
        raise SubmissionError(f'File "{filename}" must be a PDF.')


async def read_documents(uploads: Mapping[str, object]) -> Dict[str, Optional[ApplicationDocument]]:
    """
    Read every upload concurrently. Entries that are missing, or uploads
    without a filename (an empty file input), come back as None.

    At most MAX_FILE_SIZE + 1 bytes are read per file, which is enough to
    tell an oversized file apart.
    """
    async def _read(slot):
        upload = uploads.get(slot.field)
        if upload is None or not getattr(upload, "filename", None):
            return slot.field, None
        content = await upload.read(MAX_FILE_SIZE + 1)
        return slot.field, ApplicationDocument(
            slot=slot,
            filename=upload.filename,
            content_type=upload.content_type or "",
            content=content,
        )

    pairs = await asyncio.gather(*(_read(slot) for slot in DOCUMENT_SLOTS))
    return dict(pairs)


def validate_submission(
    applicant_name: Optional[str],
    applicant_email: Optional[str],
    documents: Mapping[str, Optional[ApplicationDocument]],
    verify_signature: bool = False,
) -> ApplicationSubmission:
    name = (applicant_name or "").strip()
    email = (applicant_email or "").strip()
    if not name or not email:
        raise SubmissionError("Name and email are required.")

    ordered = [documents.get(slot.field) for slot in DOCUMENT_SLOTS]
    if any(doc is None for doc in ordered):
        raise SubmissionError("All four documents are required.")

    for doc in ordered:
        head = doc.content[:len(PDF_SIGNATURE)] if verify_signature else None
        check_document(doc.filename, doc.size, doc.content_type, head)

    return ApplicationSubmission(applicant_name=name, applicant_email=email, documents=ordered)


def slugify_name(name: str) -> str:
    return re.sub(r"\s+", "-", name.strip()).lower()


def attachment_filename(prefix: str, applicant_name: str) -> str:
    return f"{prefix}-{slugify_name(applicant_name)}.pdf"


async def encode_documents(documents: List[ApplicationDocument]) -> List[str]:
    # independent conversions, order of results matches input
    return list(await asyncio.gather(*(asyncio.to_thread(doc.to_base64) for doc in documents)))


async def build_attachments(submission: ApplicationSubmission) -> List[Attachment]:
    encoded = await encode_documents(submission.documents)
    return [
        Attachment(
            filename=attachment_filename(doc.slot.prefix, submission.applicant_name),
            content=content,
        )
        for doc, content in zip(submission.documents, encoded)
    ]


def webhook_payload(submission: ApplicationSubmission) -> dict:
    return {
        "applicantName": submission.applicant_name,
        "applicantEmail": submission.applicant_email,
        "submittedAt": submission.submitted_at.isoformat(),
        "documents": list(WEBHOOK_DOCUMENTS),
    }
