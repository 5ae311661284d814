import textwrap
from pathlib import Path

import pytest

from app.exceptions import DocumentNotFound
from app.repos.content_repo import FileContentRepo
from app.services.content_store import ContentStore
from app.settings import Settings


def write_doc(root: Path, relpath: str, text: str) -> Path:
    """Write a dedented content file under root, creating directories."""
    path = root / relpath
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def content_root(tmp_path):
    (tmp_path / "_posts").mkdir()
    (tmp_path / "_drafts").mkdir()
    return tmp_path


@pytest.fixture
def content_settings(content_root):
    return Settings(CONTENT_ROOT=str(content_root), CONTENT_API_KEY="secret")


@pytest.fixture
def repo(content_settings):
    return FileContentRepo.from_settings(content_settings)


@pytest.fixture
def store(repo):
    return ContentStore(repo=repo)


class FakeContentStore:
    """
    Minimal content store stand-in for router tests.
    """

    def __init__(self, documents=None, tags=None, error=None):
        self.documents = documents or []
        self.tags = tags or {}
        self.error = error

    def list_documents(self, status):
        if self.error:
            raise self.error
        return [doc for doc in self.documents if doc.status == status]

    def get_document(self, doc_id: str):
        if self.error:
            raise self.error
        for doc in self.documents:
            if doc.id == doc_id:
                return doc
        raise DocumentNotFound(doc_id)

    def list_tags(self):
        if self.error:
            raise self.error
        return self.tags

    def documents_by_tag(self, tag: str):
        if self.error:
            raise self.error
        return [doc for doc in self.documents if tag in doc.tags]
