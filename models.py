# models.py - request-scoped domain objects (nothing here is persisted)
import base64
import datetime
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

PDF_CONTENT_TYPE = "application/pdf"
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB per file


class JourneyStage(str, Enum):
    EXPLORING = "exploring"
    APPLYING = "applying"
    POSTDOC = "postdoc"
    LICENSED = "licensed"

    @property
    def label(self) -> str:
        return JOURNEY_LABELS[self]


JOURNEY_LABELS = {
    JourneyStage.EXPLORING: "Exploring clinical psychology (undergrad/early grad)",
    JourneyStage.APPLYING: "Preparing for internship applications (3rd-4th year)",
    JourneyStage.POSTDOC: "Seeking post-doc/supervision hours",
    JourneyStage.LICENSED: "Licensed professional seeking consultation",
}


@dataclass(frozen=True)
class DocumentSlot:
    field: str
    prefix: str
    staff_label: str
    applicant_label: str


# Order matters: validation, attachments and email listings all follow it.
DOCUMENT_SLOTS = (
    DocumentSlot("coverLetter", "cover-letter", "Cover Letter", "Cover Letter"),
    DocumentSlot("resume", "resume", "Resume / CV", "Resume/CV"),
    DocumentSlot("application", "application", "Completed Application", "Application"),
    DocumentSlot("availabilityForm", "availability-form", "Completed Availability Form", "Availability Form"),
)


@dataclass
class ApplicationDocument:
    slot: DocumentSlot
    filename: str
    content_type: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)

    def to_base64(self) -> str:
        return base64.b64encode(self.content).decode("ascii")


@dataclass
class ApplicationSubmission:
    applicant_name: str
    applicant_email: str
    documents: List[ApplicationDocument]
    submitted_at: datetime.datetime = field(
        default_factory=lambda: datetime.datetime.now(datetime.timezone.utc)
    )


@dataclass
class Attachment:
    filename: str
    content: str  # base64
    content_type: str = PDF_CONTENT_TYPE


@dataclass
class Subscriber:
    email: str
    journey: JourneyStage

    def __post_init__(self):
        if not self.email or not self.journey:
            raise ValueError("Email and journey are required.")


@dataclass
class SubscribeResult:
    success: bool
    message: Optional[str] = None
    error: Any = None
