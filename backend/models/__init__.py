"""
Domain Models - Storage-agnostic data structures

These models represent the dossier directory independent of the storage layer.
Repositories and services operate on these models, not raw database rows.

Architecture:
- Domain models are pure Python objects (dataclasses)
- Storage details (Supabase REST + storage) are abstracted via backends
- API request/response shapes live in models.api (pydantic)
"""

from .domain import (
    Category,
    VerificationLevel,
    ProfileStatus,
    RawDossierRecord,
    Profile,
    DossierEdit,
    SearchResult,
)

__all__ = [
    'Category',
    'VerificationLevel',
    'ProfileStatus',
    'RawDossierRecord',
    'Profile',
    'DossierEdit',
    'SearchResult',
]
