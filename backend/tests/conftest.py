"""
Pytest configuration for dossier directory tests.

Async tests run under pytest-asyncio (asyncio_mode = "auto" in pyproject).
"""
import copy
from typing import Any, Dict, List, Optional

import pytest

from services.dossier_backend import DossierBackend, BackendResult
from services.summarizer import Summarizer


def make_row(**overrides) -> Dict[str, Any]:
    """A valid dossier row; keyword overrides replace top-level fields"""
    row = {
        'id': 'd-1',
        'full_name': 'Amina Yusuf',
        'role': 'Minister of Education',
        'bio': 'Education reformer.',
        'status': 'Verified',
        'reputation_score': 70,
        'image_url': 'https://cdn.test/amina.jpg',
        'category': 'Politics',
        'verification_level': 'Golden',
        'details': {
            'fullBio': {
                'en': 'Full English biography.',
                'so': 'Taariikh nololeed buuxda.',
            },
            'timeline': {
                'en': [{'year': '2019', 'title': 'Minister', 'description': 'Appointed.'}],
            },
            'isOrganization': False,
            'status': 'ACTIVE',
            'dateStart': '1974',
            'location': 'Mogadishu',
        },
    }
    row.update(overrides)
    return copy.deepcopy(row)


class FakeBackend(DossierBackend):
    """
    In-memory backend with scripted failures.

    Records every call in `calls` as (method, args) tuples.
    """

    def __init__(
        self,
        rows: Optional[List[Dict[str, Any]]] = None,
        configured: bool = True,
        fetch_error: Optional[str] = None,
        write_error: Optional[str] = None,
        upload_error: Optional[str] = None,
        public_url_base: str = 'https://cdn.test/images/',
    ):
        self.rows = [copy.deepcopy(r) for r in (rows or [])]
        self.configured = configured
        self.fetch_error = fetch_error
        self.write_error = write_error
        self.upload_error = upload_error
        self.public_url_base = public_url_base
        self.calls: List[tuple] = []
        self.closed = False

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def fetch_all(self) -> BackendResult:
        self.calls.append(('fetch_all', ()))
        if self.fetch_error:
            return BackendResult.failure(self.fetch_error)
        return BackendResult.success(copy.deepcopy(self.rows))

    async def insert(self, row):
        self.calls.append(('insert', (row,)))
        if self.write_error:
            return BackendResult.failure(self.write_error)
        stored = dict(row, id=f'd-{len(self.rows) + 100}')
        self.rows.append(stored)
        return BackendResult.success([stored])

    async def update(self, dossier_id, row):
        self.calls.append(('update', (dossier_id, row)))
        if self.write_error:
            return BackendResult.failure(self.write_error)
        for stored in self.rows:
            if stored['id'] == dossier_id:
                stored.update(row)
        return BackendResult.success(None)

    async def delete(self, dossier_id):
        self.calls.append(('delete', (dossier_id,)))
        if self.write_error:
            return BackendResult.failure(self.write_error)
        self.rows = [r for r in self.rows if r['id'] != dossier_id]
        return BackendResult.success(None)

    async def upload_image(self, key, content, content_type=None):
        self.calls.append(('upload_image', (key, content, content_type)))
        if self.upload_error:
            return BackendResult.failure(self.upload_error)
        return BackendResult.success({'Key': key})

    async def get_public_url(self, key):
        self.calls.append(('get_public_url', (key,)))
        return f'{self.public_url_base}{key}' if self.public_url_base else ''

    async def close(self):
        self.closed = True

    def call_names(self) -> List[str]:
        return [name for name, _ in self.calls]


class FakeSummarizer(Summarizer):
    """Summarizer returning a fixed text and recording its calls"""

    def __init__(self, text: str = "No records found.", configured: bool = True):
        self.text = text
        self.configured = configured
        self.calls: List[tuple] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def summarize(self, query: str, language: str) -> str:
        self.calls.append((query, language))
        return self.text


@pytest.fixture
def row():
    return make_row()


@pytest.fixture
def fake_backend():
    return FakeBackend(rows=[make_row()])


@pytest.fixture
def fake_summarizer():
    return FakeSummarizer()
