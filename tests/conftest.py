import pytest
from fastapi.testclient import TestClient

from app import app, get_mailer, get_mailing_list, get_settings
from helpers import FakeMailer, FakeMailingList, make_settings


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def mailing_list():
    return FakeMailingList()


@pytest.fixture
def client(settings, mailer, mailing_list):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_mailer] = lambda: mailer
    app.dependency_overrides[get_mailing_list] = lambda: mailing_list
    yield TestClient(app)
    app.dependency_overrides.clear()
