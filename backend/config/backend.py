"""
Backend Configuration
=====================

Decides once, at startup, whether the remote dossier backend is usable and
builds the matching adapter. The check is pure: it never touches the network
and never raises on bad configuration.
"""
import logging
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from config.settings import Settings
    from services.dossier_backend import DossierBackend

logger = logging.getLogger(__name__)

# Values shipped in templates and docs that must never count as configured
PLACEHOLDER_URL_MARKERS = (
    'xyzcompany',
    'your-project',
    'your_project',
    'example.com',
    'example.supabase.co',
)

PLACEHOLDER_TOKENS = {
    'your-anon-key',
    'your_anon_key',
    'your-supabase-anon-key',
    'supabase_anon_key',
    'changeme',
    'placeholder',
}


def is_backend_configured(url: Optional[str], token: Optional[str]) -> bool:
    """
    Check whether connection settings describe a usable backend.

    Requires a non-empty http(s) URL that is not a known placeholder, and a
    non-empty access token that is not a known placeholder.
    """
    if not url or not token:
        return False

    url = url.strip()
    token = token.strip()
    if not url or not token:
        return False

    if not url.lower().startswith(('http://', 'https://')):
        return False

    lowered = url.lower()
    if any(marker in lowered for marker in PLACEHOLDER_URL_MARKERS):
        return False

    if token.lower() in PLACEHOLDER_TOKENS:
        return False

    return True


@dataclass
class BackendConfig:
    """Supabase connection configuration."""
    url: str
    api_key: str
    table: str = 'dossiers'
    bucket: str = 'dossier-images'
    timeout: float = 30.0

    @classmethod
    def from_settings(cls, settings: 'Settings') -> 'BackendConfig':
        """Create config from application settings."""
        return cls(
            url=settings.supabase_url,
            api_key=settings.supabase_anon_key,
            table=settings.dossier_table,
            bucket=settings.image_bucket,
            timeout=settings.backend_timeout,
        )

    @property
    def is_configured(self) -> bool:
        return is_backend_configured(self.url, self.api_key)


def create_dossier_backend(config: BackendConfig) -> 'DossierBackend':
    """Build the live backend when configured, otherwise the mock backend."""
    if config.is_configured:
        from services.supabase_backend import SupabaseDossierBackend
        logger.info(f"Dossier backend configured at {config.url}")
        return SupabaseDossierBackend(
            url=config.url,
            api_key=config.api_key,
            table=config.table,
            bucket=config.bucket,
            timeout=config.timeout,
        )

    from services.mock_backend import MockDossierBackend
    logger.warning("Dossier backend is not configured, running in demo mode with bundled dossiers")
    return MockDossierBackend()
