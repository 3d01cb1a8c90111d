"""
Dossier Backend Abstraction
===========================

Capability set shared by the live (Supabase) and mock backends:
- dossiers table: select-all, insert-one, update-by-id, delete-by-id
- image storage: upload-by-key, public-url-by-key

Backends never raise. Every call returns a BackendResult carrying either
data or a BackendFailure with the backend's message, mirroring the
`{data, error}` envelope of the remote API.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class BackendFailure:
    """Error reported by a backend call"""
    message: str
    status_code: Optional[int] = None


@dataclass(frozen=True)
class BackendResult:
    """
    Envelope for backend calls.

    INVARIANT: `error` is None on success. `data` may still be None on success
    (e.g. delete).
    """
    data: Any = None
    error: Optional[BackendFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: Any = None) -> 'BackendResult':
        return cls(data=data)

    @classmethod
    def failure(cls, message: str, status_code: Optional[int] = None) -> 'BackendResult':
        return cls(error=BackendFailure(message=message, status_code=status_code))


class DossierBackend(ABC):
    """
    Remote CRUD + storage contract for dossiers.

    Implementations are selected once at startup (see
    config.backend.create_dossier_backend) and injected into the repository.
    """

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether this backend talks to a real remote service"""
        pass

    @abstractmethod
    async def fetch_all(self) -> BackendResult:
        """Select every dossier row. data: list of row dicts"""
        pass

    @abstractmethod
    async def insert(self, row: Dict[str, Any]) -> BackendResult:
        """Insert one dossier row"""
        pass

    @abstractmethod
    async def update(self, dossier_id: str, row: Dict[str, Any]) -> BackendResult:
        """Update the dossier with the given id"""
        pass

    @abstractmethod
    async def delete(self, dossier_id: str) -> BackendResult:
        """Delete the dossier with the given id"""
        pass

    @abstractmethod
    async def upload_image(self, key: str, content: bytes, content_type: Optional[str] = None) -> BackendResult:
        """Store image bytes under the given key"""
        pass

    @abstractmethod
    async def get_public_url(self, key: str) -> str:
        """Public URL for a stored key ('' when unavailable)"""
        pass

    async def close(self) -> None:
        """Release network resources (no-op by default)"""
        return None


def rows_from(result: BackendResult) -> List[Dict[str, Any]]:
    """Row list from a successful fetch result (empty when data is missing)"""
    if not result.ok or not result.data:
        return []
    return list(result.data)
