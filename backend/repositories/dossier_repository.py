"""
Dossier Repository - directory data access

Storage: whichever DossierBackend was injected at startup (Supabase or mock).
There is one code path regardless of configuration state.

Consistency model:
- fetch_all is the only operation that mutates the cached profiles
- save/delete never touch the cache directly; they always refetch
- the cache holds profiles for one language; switching language
  invalidates it and re-normalizes from a fresh fetch
"""
import logging
from typing import Dict, List, Optional

from models.domain.dossier import DossierEdit, Profile
from services.dossier_backend import DossierBackend, rows_from
from services.dossier_denormalizer import denormalize
from services.dossier_normalizer import normalize_all
from services.errors import BackendError, UploadError
from services.localization import resolve_language
from utils.id_generator import generate_storage_key
from repositories.fallback_dossiers import get_fallback_rows

logger = logging.getLogger(__name__)


class DossierRepository:
    """
    Repository for the dossier directory

    Usage:
        repo = DossierRepository(create_dossier_backend(config))
        profiles = await repo.fetch_all('so')
        profiles = await repo.save(form)
    """

    def __init__(self, backend: DossierBackend, language: str = 'en'):
        self.backend = backend
        self.language = resolve_language(language)
        self._in_flight = 0
        self._cache: Dict[str, List[Profile]] = {}

    @property
    def is_loading(self) -> bool:
        """True while any fetch is in flight"""
        return self._in_flight > 0

    @property
    def profiles(self) -> List[Profile]:
        """Profiles from the last fetch for the current language"""
        return list(self._cache.get(self.language, []))

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    async def fetch_all(self, language: Optional[str] = None) -> List[Profile]:
        """
        Fetch and normalize every dossier for a language.

        Never returns an empty list: backend errors, an empty table, or a
        batch where every row was invalid all fall back to the bundled
        dossiers normalized for the same language.

        Args:
            language: language code (defaults to the current language)

        Returns:
            List of Profiles
        """
        language = resolve_language(language or self.language)
        self._in_flight += 1
        try:
            result = await self.backend.fetch_all()

            if not result.ok:
                logger.error(f"Error fetching dossiers: {result.error.message}. Serving fallback dossiers")
                profiles = self._fallback(language)
            else:
                rows = rows_from(result)
                if not rows:
                    if self.backend.is_configured:
                        logger.info("Dossier table is empty, serving fallback dossiers")
                    profiles = self._fallback(language)
                else:
                    profiles = normalize_all(rows, language)
                    if not profiles:
                        logger.warning(f"All {len(rows)} dossier rows were invalid, serving fallback dossiers")
                        profiles = self._fallback(language)

            self.language = language
            self._cache = {language: profiles}
            return list(profiles)
        finally:
            self._in_flight -= 1

    async def get(self, dossier_id: str, language: Optional[str] = None) -> Optional[Profile]:
        """
        Retrieve one profile by id.

        Uses the cache when it already holds the requested language.
        """
        language = resolve_language(language or self.language)
        profiles = self._cache.get(language)
        if profiles is None:
            profiles = await self.fetch_all(language)
        for profile in profiles:
            if profile.id == dossier_id:
                return profile
        return None

    async def set_language(self, language: str) -> List[Profile]:
        """Switch the active language, re-normalizing from a fresh fetch"""
        language = resolve_language(language)
        if language != self.language:
            self._cache.clear()
        return await self.fetch_all(language)

    # =========================================================================
    # WRITE OPERATIONS
    # =========================================================================

    async def save(self, form: DossierEdit, language: Optional[str] = None) -> List[Profile]:
        """
        Create or update a dossier, then refresh the directory.

        Updates when form.id is set, inserts otherwise.

        Raises:
            ValidationError: if the form is missing name or category
            BackendError: with the backend's message if the write fails
        """
        language = resolve_language(language or self.language)
        row = denormalize(form, language)

        if form.id:
            result = await self.backend.update(form.id, row)
        else:
            result = await self.backend.insert(row)

        if not result.ok:
            logger.error(f"Error saving dossier {form.id or row['full_name']}: {result.error.message}")
            raise BackendError(result.error.message)

        logger.info(f"{'Updated' if form.id else 'Created'} dossier {form.id or row['full_name']}")
        return await self.fetch_all(language)

    async def delete(self, dossier_id: str) -> List[Profile]:
        """
        Delete a dossier, then refresh the directory.

        Callers are responsible for confirming the deletion first.

        Raises:
            BackendError: with the backend's message if the delete fails
        """
        result = await self.backend.delete(dossier_id)
        if not result.ok:
            logger.error(f"Error deleting dossier {dossier_id}: {result.error.message}")
            raise BackendError(result.error.message)

        logger.info(f"Deleted dossier {dossier_id}")
        return await self.fetch_all(self.language)

    async def upload_image(self, filename: str, content: bytes, content_type: Optional[str] = None) -> str:
        """
        Store an image under a random key and return its public URL.

        The key keeps the original file extension.

        Raises:
            UploadError: with the backend's message if the upload or the
                public URL lookup fails
        """
        key = generate_storage_key(filename)

        result = await self.backend.upload_image(key, content, content_type)
        if not result.ok:
            logger.error(f"Error uploading image {filename}: {result.error.message}")
            raise UploadError(result.error.message)

        url = await self.backend.get_public_url(key)
        if not url:
            logger.error(f"No public URL for uploaded image {key}")
            raise UploadError(f"No public URL available for {key}")

        logger.info(f"Uploaded image {filename} as {key}")
        return url

    # =========================================================================
    # HELPERS
    # =========================================================================

    @staticmethod
    def _fallback(language: str) -> List[Profile]:
        return normalize_all(get_fallback_rows(), language)
