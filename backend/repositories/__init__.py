"""
Repository Pattern - Storage abstraction layer

Repositories hide storage details (Supabase REST + storage, or the demo-mode
mock) from business logic. Consumers work with domain models, not rows.

- DossierRepository: directory reads, admin writes, image uploads
"""
from .dossier_repository import DossierRepository
from .fallback_dossiers import FALLBACK_DOSSIERS, get_fallback_rows

__all__ = [
    'DossierRepository',
    'FALLBACK_DOSSIERS',
    'get_fallback_rows',
]
