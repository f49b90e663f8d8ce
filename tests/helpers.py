from config import Settings
from models import SubscribeResult


class FakeMailer:
    def __init__(self, fail_on=None):
        self.sent = []
        self.fail_on = fail_on

    def send(self, message):
        if self.fail_on is not None and len(self.sent) == self.fail_on:
            raise RuntimeError("provider down")
        self.sent.append(message)
        return {"id": f"email-{len(self.sent)}"}


class FakeMailingList:
    def __init__(self, error=None):
        self.members = set()
        self.calls = []
        self.error = error

    def subscribe(self, subscriber):
        email = subscriber.email
        self.calls.append((email, subscriber.journey.value))
        if self.error is not None:
            return SubscribeResult(success=False, error=self.error)
        if email in self.members:
            return SubscribeResult(success=True, message="Already subscribed!")
        self.members.add(email)
        return SubscribeResult(success=True, message="Successfully subscribed!")


def make_settings(**overrides):
    values = dict(
        resend_api_key="re_test",
        staff_email="staff@sctc.test",
        mailchimp_api_key="mc_test",
        mailchimp_server_prefix="us21",
        mailchimp_list_id="list123",
    )
    values.update(overrides)
    return Settings(**values)


def pdf_bytes(size=2 * 1024 * 1024):
    head = b"%PDF-1.7\n"
    return head + b"0" * (size - len(head))


def application_files(size=2 * 1024 * 1024, **overrides):
    files = {
        "coverLetter": ("cover.pdf", pdf_bytes(size), "application/pdf"),
        "resume": ("cv.pdf", pdf_bytes(size), "application/pdf"),
        "application": ("app-form.pdf", pdf_bytes(size), "application/pdf"),
        "availabilityForm": ("availability.pdf", pdf_bytes(size), "application/pdf"),
    }
    for key, value in overrides.items():
        if value is None:
            files.pop(key)
        else:
            files[key] = value
    return files
