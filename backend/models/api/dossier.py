"""
Dossier API request/response models
"""
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from models.domain.dossier import DossierEdit


class DossierEditRequest(BaseModel):
    """Admin edit form as submitted by the admin screen"""
    full_name: Optional[str] = None
    role: Optional[str] = None
    bio: Optional[str] = None
    status: Optional[str] = None
    reputation_score: Optional[int] = Field(default=None, ge=0, le=100)
    image_url: Optional[str] = None
    category: Optional[str] = None
    verification_level: Optional[str] = None
    details: Optional[Dict[str, Any]] = None
    full_bio: Optional[str] = None
    timeline: Optional[List[Dict[str, Any]]] = None

    def to_form(self, dossier_id: Optional[str] = None) -> DossierEdit:
        return DossierEdit(id=dossier_id, **self.model_dump())


class AdminLoginRequest(BaseModel):
    secret: str


class AdminLoginResponse(BaseModel):
    authenticated: bool
    subject: str


class UploadResponse(BaseModel):
    url: str


class StatusResponse(BaseModel):
    backend_configured: bool
    summarizer_configured: bool
    admin_enabled: bool
    languages: List[str]
    default_language: str
