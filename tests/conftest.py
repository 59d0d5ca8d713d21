from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from docstore.config import Settings
from docstore.domains.documents.entities import Author, Document
from docstore.domains.documents.services import DocumentService
from docstore.main import create_app


@pytest.fixture
def now():
    return datetime.now(timezone.utc)


@pytest.fixture
def service():
    return DocumentService()


@pytest.fixture
def seeded(service, now):
    """Store with three documents: two by author1, one under a custom id."""
    java = Document(
        title="Java Programming",
        content="Java",
        author=Author(id="author1", name="JD"),
        created=now,
    )
    python = Document(
        id="custom-id",
        title="Python",
        content="Python",
        author=Author(id="author2", name="JS"),
        created=now - timedelta(days=7),
    )
    javascript = Document(
        title="JavaScript",
        content="JavaScript is used in web development ... ",
        author=Author(id="author1", name="JD"),
        created=now - timedelta(days=3),
    )
    for document in (java, python, javascript):
        service.save(document)
    return {"java": java, "python": python, "javascript": javascript}


@pytest.fixture
def client(service):
    app = create_app(Settings(log_level="DEBUG"), service=service)
    return TestClient(app)
