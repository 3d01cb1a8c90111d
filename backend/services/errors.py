"""
Dossier error taxonomy.

Configuration problems are never raised: they only select the mock backend.
"""
from typing import Optional


class DossierError(Exception):
    """Base class for dossier data-layer errors."""
    pass


class ValidationError(DossierError):
    """Raised when a record or edit form is missing a required field or has a bad shape."""

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        self.message = message or f"Missing required field: {field}"
        super().__init__(self.message)


class BackendError(DossierError):
    """Remote CRUD or storage failure. Carries the backend's message verbatim."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UploadError(BackendError):
    """Raised when an image upload or public URL lookup fails."""
    pass


class SummarizationError(DossierError):
    """Raised internally when the summarization call fails. Never shown to users."""
    pass


class AuthenticationError(DossierError):
    """Raised when admin credentials are rejected."""
    pass
