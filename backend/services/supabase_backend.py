"""
Supabase Dossier Backend
========================

Live backend over the Supabase REST (PostgREST) and Storage HTTP APIs.

Endpoints:
- GET    /rest/v1/{table}?select=*        select-all
- POST   /rest/v1/{table}                 insert-one
- PATCH  /rest/v1/{table}?id=eq.{id}      update-by-id
- DELETE /rest/v1/{table}?id=eq.{id}      delete-by-id
- POST   /storage/v1/object/{bucket}/{key}  upload
- /storage/v1/object/public/{bucket}/{key}  public URL (no request)

Transport errors and non-2xx responses are returned as BackendFailure with
the server's own message; nothing is raised to callers.
"""
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from services.dossier_backend import DossierBackend, BackendResult

logger = logging.getLogger(__name__)


class SupabaseDossierBackend(DossierBackend):
    """
    Dossier backend backed by a Supabase project.

    Usage:
        backend = SupabaseDossierBackend(url, anon_key)
        result = await backend.fetch_all()
        if result.ok:
            rows = result.data
    """

    def __init__(
        self,
        url: str,
        api_key: str,
        table: str = 'dossiers',
        bucket: str = 'dossier-images',
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = url.rstrip('/')
        self.table = table
        self.bucket = bucket
        self.headers = {
            'apikey': api_key,
            'Authorization': f'Bearer {api_key}',
        }
        self.client = client or httpx.AsyncClient(base_url=self.url, timeout=timeout)
        self._owns_client = client is None

    @property
    def is_configured(self) -> bool:
        return True

    async def close(self):
        """Close the HTTP client if this backend created it"""
        if self._owns_client:
            await self.client.aclose()

    # =========================================================================
    # TABLE OPERATIONS
    # =========================================================================

    async def fetch_all(self) -> BackendResult:
        return await self._request('GET', self._table_path, params={'select': '*'})

    async def insert(self, row: Dict[str, Any]) -> BackendResult:
        return await self._request(
            'POST',
            self._table_path,
            json=[row],
            headers={'Prefer': 'return=representation'},
        )

    async def update(self, dossier_id: str, row: Dict[str, Any]) -> BackendResult:
        return await self._request(
            'PATCH',
            self._table_path,
            params={'id': f'eq.{dossier_id}'},
            json=row,
            headers={'Prefer': 'return=representation'},
        )

    async def delete(self, dossier_id: str) -> BackendResult:
        return await self._request('DELETE', self._table_path, params={'id': f'eq.{dossier_id}'})

    # =========================================================================
    # STORAGE OPERATIONS
    # =========================================================================

    async def upload_image(self, key: str, content: bytes, content_type: Optional[str] = None) -> BackendResult:
        headers = {'x-upsert': 'false'}
        if content_type:
            headers['Content-Type'] = content_type
        return await self._request(
            'POST',
            f'/storage/v1/object/{self.bucket}/{quote(key)}',
            content=content,
            headers=headers,
        )

    async def get_public_url(self, key: str) -> str:
        return f'{self.url}/storage/v1/object/public/{self.bucket}/{quote(key)}'

    # =========================================================================
    # HELPERS
    # =========================================================================

    @property
    def _table_path(self) -> str:
        return f'/rest/v1/{self.table}'

    async def _request(self, method: str, path: str, headers: Optional[dict] = None, **kwargs) -> BackendResult:
        request_headers = dict(self.headers)
        if headers:
            request_headers.update(headers)

        try:
            response = await self.client.request(method, path, headers=request_headers, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"Supabase {method} {path} failed: {e}")
            return BackendResult.failure(str(e) or e.__class__.__name__)

        if response.is_error:
            message = _error_message(response)
            logger.error(f"Supabase {method} {path} returned {response.status_code}: {message}")
            return BackendResult.failure(message, status_code=response.status_code)

        if not response.content:
            return BackendResult.success(None)

        try:
            return BackendResult.success(response.json())
        except ValueError:
            return BackendResult.success(response.text)


def _error_message(response: httpx.Response) -> str:
    """Extract the server's error message from a Supabase error response"""
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"

    if isinstance(body, dict):
        for key in ('message', 'error_description', 'error', 'msg'):
            if body.get(key):
                return str(body[key])
    return response.text or f"HTTP {response.status_code}"
