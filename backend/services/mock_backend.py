"""
Mock Dossier Backend
====================

Stand-in used when no backend is configured (demo mode).

GUARANTEES:
- Accepts any arguments and never raises
- fetch_all succeeds with no rows, so callers serve the bundled dossiers
- Writes and uploads fail with the same "not configured" message
- Public URLs are empty strings
"""
from typing import Any, Dict, Optional

from services.dossier_backend import DossierBackend, BackendResult

NOT_CONFIGURED_MESSAGE = "Dossier backend not configured"


class MockDossierBackend(DossierBackend):
    """No-op backend with the same surface as the live one"""

    @property
    def is_configured(self) -> bool:
        return False

    async def fetch_all(self) -> BackendResult:
        return BackendResult.success([])

    async def insert(self, row: Dict[str, Any]) -> BackendResult:
        return BackendResult.failure(NOT_CONFIGURED_MESSAGE)

    async def update(self, dossier_id: str, row: Dict[str, Any]) -> BackendResult:
        return BackendResult.failure(NOT_CONFIGURED_MESSAGE)

    async def delete(self, dossier_id: str) -> BackendResult:
        return BackendResult.failure(NOT_CONFIGURED_MESSAGE)

    async def upload_image(self, key: str, content: bytes, content_type: Optional[str] = None) -> BackendResult:
        return BackendResult.failure(NOT_CONFIGURED_MESSAGE)

    async def get_public_url(self, key: str) -> str:
        return ""
