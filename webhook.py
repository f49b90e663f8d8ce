# webhook.py - optional submission notification (e.g. a Zapier hook that files documents)
import logging

import requests

logger = logging.getLogger("sctc-webhook")


def notify_webhook(url: str, payload: dict, timeout: float = 10.0) -> bool:
    """
    POST the submission summary as JSON.

    Runs after the response has been sent, so failures are logged and
    reported through the return value only. There is no retry.
    """
    try:
        response = requests.post(url, json=payload, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException:
        logger.exception("Webhook call failed for %s", payload.get("applicantEmail"))
        return False
    logger.info("Webhook notified for %s (status=%s)", payload.get("applicantEmail"), response.status_code)
    return True
