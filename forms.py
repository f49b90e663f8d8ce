# forms.py - state of the application upload form, mirrored by the browser client
from dataclasses import dataclass, field
from typing import Dict, Optional

from models import DOCUMENT_SLOTS, MAX_FILE_SIZE, PDF_CONTENT_TYPE
from processor import SubmissionError, check_document, format_file_size

IDLE = "idle"
SUBMITTING = "submitting"
SUCCESS = "success"
ERROR = "error"


def form_requirements() -> dict:
    return {
        "documents": [{"field": s.field, "label": s.staff_label} for s in DOCUMENT_SLOTS],
        "text_fields": ["applicantName", "applicantEmail"],
        "max_file_size": MAX_FILE_SIZE,
        "accepted_type": PDF_CONTENT_TYPE,
    }


@dataclass
class FieldState:
    filename: str
    size_label: str


@dataclass
class UploadFormState:
    name: str = ""
    email: str = ""
    files: Dict[str, Optional[FieldState]] = field(
        default_factory=lambda: {s.field: None for s in DOCUMENT_SLOTS}
    )
    status: str = IDLE
    error: Optional[str] = None

    def select_file(self, field_name: str, filename: str, size: int, content_type: str) -> bool:
        if field_name not in self.files:
            raise KeyError(field_name)
        try:
            check_document(filename, size, content_type)
        except SubmissionError as e:
            self.files[field_name] = None
            self.error = str(e)
            return False
        self.files[field_name] = FieldState(filename=filename, size_label=format_file_size(size))
        self.error = None
        return True

    def clear_file(self, field_name: str) -> None:
        self.files[field_name] = None

    @property
    def can_submit(self) -> bool:
        return (
            self.status != SUBMITTING
            and bool(self.name.strip())
            and bool(self.email.strip())
            and all(self.files.values())
        )

    def start_submit(self) -> None:
        if not self.can_submit:
            raise ValueError("Form is not ready to submit")
        self.status = SUBMITTING
        self.error = None

    def finish(self, response_status: int, body: dict) -> None:
        if response_status == 200 and body.get("success"):
            self.status = SUCCESS
            self.error = None
        else:
            self.status = ERROR
            self.error = body.get("error") or "Something went wrong. Please try again."
