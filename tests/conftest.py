"""
Pytest configuration.

The app reads its settings once at import, so the environment is pointed at a
temporary SQLite database and upload directory before anything from `app` is
imported. Tables and uploads are reset for every test.
"""

import os
import shutil
import sys
import tempfile
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

_TMP_DIR = tempfile.mkdtemp(prefix="intake-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["UPLOAD_DIR"] = os.path.join(_TMP_DIR, "uploads")
os.environ["SENDGRID_API_KEY"] = ""
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ.pop("ADMIN_EMAIL", None)
os.environ.pop("ADMIN_PASSWORD", None)

from fastapi.testclient import TestClient  # noqa: E402

from app.api.deps import get_notifier  # noqa: E402
from app.db.postgres import engine  # noqa: E402
from app.db.tables import metadata  # noqa: E402
from app.main import app, upload_store  # noqa: E402
from app.services.notification_service import NotificationOutcome  # noqa: E402

PDF_BYTES = b"%PDF-1.4\n1 0 obj << /Type /Catalog >> endobj\n%%EOF\n"


class RecordingNotifier:
    """Stands in for NotificationService and remembers every send."""

    enabled = True

    def __init__(self):
        self.sent = []

    def send_talent_welcome(self, full_name, email):
        self.sent.append(("talent", full_name, email))
        return NotificationOutcome(sent=True, status_code=202)

    def send_company_welcome(self, company_name, contact_person, email):
        self.sent.append(("company", company_name, contact_person, email))
        return NotificationOutcome(sent=True, status_code=202)

    def close(self):
        pass


# ==================== Database / filesystem ====================

@pytest.fixture(autouse=True)
def reset_state():
    """Fresh tables and an empty upload directory for each test."""
    metadata.drop_all(engine)
    metadata.create_all(engine)
    shutil.rmtree(upload_store.directory, ignore_errors=True)
    os.makedirs(upload_store.directory, exist_ok=True)
    yield


@pytest.fixture
def upload_dir() -> Path:
    return Path(upload_store.directory)


# ==================== HTTP ====================

@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def client(notifier):
    app.dependency_overrides[get_notifier] = lambda: notifier
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def register_talent(client):
    """POST a talent registration; cv is (filename, bytes, content_type) or None."""

    def _register(full_name="Ada Lovelace", email="ada@example.com", phone="+44 20 0000 0000",
                  cv=("cv.pdf", PDF_BYTES, "application/pdf")):
        files = {"cv": cv} if cv else None
        return client.post(
            "/api/talents",
            data={"fullName": full_name, "email": email, "phone": phone},
            files=files,
        )

    return _register


@pytest.fixture
def company_payload():
    return {
        "companyName": "Analytical Engines Ltd",
        "contactPerson": "Charles Babbage",
        "email": "hiring@engines.example.com",
        "phone": "+44 20 1111 1111",
        "industry": "Manufacturing",
        "requirements": "Two mechanical engineers",
    }


@pytest.fixture
def auth_headers(client):
    """Register a staff user, log in, return the Authorization header."""
    client.post("/api/auth/register", json={
        "name": "Grace Hopper",
        "email": "grace@example.com",
        "phone": "555-0100",
        "password": "cobol-rules",
    })
    response = client.post("/api/auth/login", json={"email": "grace@example.com", "password": "cobol-rules"})
    return {"Authorization": f"Bearer {response.json()['token']}"}


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "api: HTTP endpoint tests")


def pytest_sessionfinish(session, exitstatus):
    engine.dispose()
    shutil.rmtree(_TMP_DIR, ignore_errors=True)
