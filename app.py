# app.py - FastAPI server for the SCTC site: applications, newsletter signups, content
import logging
from typing import Optional

from fastapi import BackgroundTasks, Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

import content
import schemas
from config import Settings, load_settings
from forms import form_requirements
from mailer import ResendMailer, build_confirmation, build_staff_notification
from mailing_list import MailchimpList
from models import DOCUMENT_SLOTS, JourneyStage, Subscriber
from processor import (
    SubmissionError,
    build_attachments,
    read_documents,
    validate_submission,
    webhook_payload,
)
from webhook import notify_webhook

app = FastAPI(title="South Central Training Consortium - site API")

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("sctc-backend")

ERROR_RESPONSES = {400: {"model": schemas.ErrorOut}, 500: {"model": schemas.ErrorOut}}


@app.on_event("startup")
def startup_event():
    """Build settings and provider clients once; handlers get them via Depends."""
    settings = load_settings()
    logging.getLogger().setLevel(settings.log_level)
    app.state.settings = settings
    app.state.mailer = ResendMailer(settings.resend_api_key)
    app.state.mailing_list = MailchimpList.from_settings(settings)
    logger.info("[STARTUP] Providers configured (webhook %s)", "on" if settings.webhook_url else "off")


@app.on_event("shutdown")
def shutdown_event():
    logger.info("[SHUTDOWN] SCTC site API stopped")


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected malformed body on %s: %s", request.url.path, exc.errors())
    return JSONResponse({"error": "Invalid request body."}, status_code=400)


# Dependencies
def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_mailer(request: Request):
    return request.app.state.mailer


def get_mailing_list(request: Request):
    return request.app.state.mailing_list


def _text_field(form, name: str) -> Optional[str]:
    value = form.get(name)
    return value if isinstance(value, str) else None


@app.post("/apply", response_model=schemas.ApplyOut, responses=ERROR_RESPONSES)
async def apply(
    request: Request,
    background_tasks: BackgroundTasks,
    settings: Settings = Depends(get_settings),
    mailer=Depends(get_mailer),
):
    form = await request.form()
    uploads = {slot.field: form.get(slot.field) for slot in DOCUMENT_SLOTS}

    try:
        documents = await read_documents(uploads)
        submission = validate_submission(
            _text_field(form, "applicantName"),
            _text_field(form, "applicantEmail"),
            documents,
            verify_signature=settings.verify_pdf_signature,
        )
    except SubmissionError as e:
        logger.info("/apply rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    finally:
        await form.close()

    logger.info(
        "/apply called; applicant=%s; files=%s",
        submission.applicant_email,
        [doc.filename for doc in submission.documents],
    )

    # Emails go out one after the other; the staff copy carries the documents
    try:
        attachments = await build_attachments(submission)
        await run_in_threadpool(mailer.send, build_staff_notification(submission, attachments, settings))
        await run_in_threadpool(mailer.send, build_confirmation(submission, settings))
    except Exception:
        logger.exception("Application submission error for %s", submission.applicant_email)
        raise HTTPException(status_code=500, detail="Failed to process application. Please try again.")

    if settings.webhook_url:
        background_tasks.add_task(
            notify_webhook, settings.webhook_url, webhook_payload(submission), settings.webhook_timeout
        )

    return {"success": True}


@app.get("/apply/requirements")
def apply_requirements():
    return form_requirements()


@app.post("/subscribe", response_model=schemas.SubscribeOut, responses=ERROR_RESPONSES)
async def subscribe(payload: schemas.SubscribeIn, mailing_list=Depends(get_mailing_list)):
    email = (payload.email or "").strip()
    journey = (payload.journey or "").strip()
    if not email or not journey:
        raise HTTPException(status_code=400, detail="Email and journey are required.")
    try:
        stage = JourneyStage(journey)
    except ValueError:
        raise HTTPException(status_code=400, detail="Unknown journey stage.")

    result = await run_in_threadpool(mailing_list.subscribe, Subscriber(email=email, journey=stage))
    if not result.success:
        return JSONResponse({"error": result.error}, status_code=500)
    return {"message": result.message}


@app.get("/journeys", response_model=list[schemas.JourneyOption])
def journeys():
    return [{"value": stage.value, "label": stage.label} for stage in JourneyStage]


@app.get("/resources", response_model=schemas.ResourceListOut)
def resources(q: str = "", category: str = "all"):
    if category not in content.CATEGORY_IDS:
        raise HTTPException(status_code=400, detail="Unknown category.")
    return {
        "categories": content.RESOURCE_CATEGORIES,
        "featured": content.featured_resources(),
        "resources": content.filter_resources(q, category),
    }


@app.get("/newsletter", response_model=list[schemas.IssueOut])
def newsletter_issues():
    return content.NEWSLETTER_ISSUES


@app.get("/newsletter/{slug}", response_model=schemas.IssueDetailOut)
def newsletter_issue(slug: str):
    issue = content.get_issue(slug)
    if issue is None:
        raise HTTPException(status_code=404, detail="Issue not found.")
    return {"issue": issue, "related": content.related_issues(slug)}


@app.get("/health")
def health():
    return {"ok": True}
