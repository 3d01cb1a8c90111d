"""
Domain Models - Storage-agnostic data structures

Dossier Models:
- RawDossierRecord: row as stored remotely, with a typed details block
- Profile: canonical, language-resolved view used by presentation
- DossierEdit: partial admin edit form, converted back into a row on save
"""

from .dossier import (
    Language,
    SUPPORTED_LANGUAGES,
    DEFAULT_LANGUAGE,
    Category,
    VerificationLevel,
    VerificationStatus,
    ProfileStatus,
    TimelineEvent,
    ArchiveItem,
    NewsItem,
    InfluenceStats,
    DossierDetails,
    RawDossierRecord,
    Profile,
    DossierEdit,
    SearchResult,
)

__all__ = [
    'Language',
    'SUPPORTED_LANGUAGES',
    'DEFAULT_LANGUAGE',
    'Category',
    'VerificationLevel',
    'VerificationStatus',
    'ProfileStatus',
    'TimelineEvent',
    'ArchiveItem',
    'NewsItem',
    'InfluenceStats',
    'DossierDetails',
    'RawDossierRecord',
    'Profile',
    'DossierEdit',
    'SearchResult',
]
