# mailing_list.py - Field Notes newsletter signups forwarded to Mailchimp
import json
import logging

import mailchimp_marketing as MailchimpMarketing
from mailchimp_marketing.api_client import ApiClientError

from config import Settings
from models import SubscribeResult, Subscriber

logger = logging.getLogger("sctc-mailing-list")

SIGNUP_TAG = "website-signup"
JOURNEY_MERGE_FIELD = "JOURNEY"


def _error_body(error: ApiClientError):
    """Parsed provider body as a dict when there is one, otherwise a string."""
    text = error.text
    if isinstance(text, dict):
        return text
    if isinstance(text, (str, bytes)):
        try:
            parsed = json.loads(text)
        except ValueError:
            return text.decode("utf-8", "replace") if isinstance(text, bytes) else text
        if isinstance(parsed, dict):
            return parsed
    # transport failures arrive wrapping the original exception
    return str(text)


class MailchimpList:
    def __init__(self, client, list_id: str):
        self.client = client
        self.list_id = list_id

    @classmethod
    def from_settings(cls, settings: Settings) -> "MailchimpList":
        client = MailchimpMarketing.Client()
        client.set_config({
            "api_key": settings.mailchimp_api_key,
            "server": settings.mailchimp_server_prefix,
        })
        return cls(client, settings.mailchimp_list_id)

    def subscribe(self, subscriber: Subscriber) -> SubscribeResult:
        email = subscriber.email
        journey = subscriber.journey.value
        body = {
            "email_address": email,
            "status": "subscribed",
            "merge_fields": {JOURNEY_MERGE_FIELD: journey},
            "tags": [SIGNUP_TAG],
        }
        try:
            self.client.lists.add_list_member(self.list_id, body)
            logger.info("Subscribed %s (journey=%s)", email, journey)
            return SubscribeResult(success=True, message="Successfully subscribed!")
        except ApiClientError as e:
            payload = _error_body(e)
            if e.status_code == 400 and isinstance(payload, dict) and payload.get("title") == "Member Exists":
                logger.info("%s is already on the list", email)
                return SubscribeResult(success=True, message="Already subscribed!")
            logger.error("Mailchimp rejected %s: status=%s body=%s", email, e.status_code, payload)
            detail = (payload.get("detail") or payload.get("title")) if isinstance(payload, dict) else payload
            return SubscribeResult(success=False, error=str(detail or "Subscription failed"))
