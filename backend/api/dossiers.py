"""
Dossiers API
============

Public directory:
- GET  /api/dossiers?lang=so&q=...   list (optionally filtered)
- GET  /api/dossiers/{id}?lang=ar    one profile
- GET  /api/search?q=...&lang=en     local match or archive summary
- GET  /api/status                   backend / summarizer configuration

Profiles carry localized lifecycle and tier labels plus the text direction.

Admin (X-Admin-Secret header):
- POST   /api/admin/login
- GET    /api/dossiers/form/new      blank edit form
- GET    /api/dossiers/{id}/form     edit form for an existing dossier
- POST   /api/dossiers               create
- PUT    /api/dossiers/{id}          update
- DELETE /api/dossiers/{id}          delete
- POST   /api/dossiers/images        upload image, returns public URL

Writes return the refreshed directory. Backend error messages are passed
through to admins verbatim; public endpoints never expose them.
"""
from fastapi import APIRouter, Depends, File, HTTPException, Query, Request, UploadFile
from typing import List, Optional

from middleware.auth import AdminSession, require_admin
from models.api.dossier import (
    AdminLoginRequest,
    AdminLoginResponse,
    DossierEditRequest,
    StatusResponse,
    UploadResponse,
)
from models.domain.dossier import SUPPORTED_LANGUAGES, Profile
from repositories.dossier_repository import DossierRepository
from services.errors import AuthenticationError, BackendError, ValidationError
from services.dossier_denormalizer import edit_form_from_profile, new_edit_form
from services.localization import profile_view, resolve_language
from services.query_resolver import QueryResolver, filter_profiles

router = APIRouter(prefix="/api", tags=["Dossiers"])


def get_repository(request: Request) -> DossierRepository:
    return request.app.state.repository


def get_resolver(request: Request) -> QueryResolver:
    return request.app.state.resolver


async def _profiles_for(repo: DossierRepository, language: str) -> List[Profile]:
    """Cached profiles when they match the language, otherwise a fresh fetch"""
    if repo.language == language and repo.profiles:
        return repo.profiles
    return await repo.fetch_all(language)


# =============================================================================
# Public endpoints
# =============================================================================

@router.get("/dossiers")
async def list_dossiers(
    lang: Optional[str] = Query(None, description="Language code (en, so, ar)"),
    q: Optional[str] = Query(None, description="Filter by name or category"),
    repo: DossierRepository = Depends(get_repository),
):
    """List every dossier resolved for a language"""
    profiles = await repo.fetch_all(resolve_language(lang))
    if q:
        profiles = filter_profiles(q, profiles)
    return [profile_view(p) for p in profiles]


@router.get("/dossiers/{dossier_id}")
async def get_dossier(
    dossier_id: str,
    lang: Optional[str] = Query(None),
    repo: DossierRepository = Depends(get_repository),
):
    profile = await repo.get(dossier_id, resolve_language(lang))
    if not profile:
        raise HTTPException(status_code=404, detail="Dossier not found")
    return profile_view(profile)


@router.get("/search")
async def search(
    q: str = Query("", description="Search query"),
    lang: Optional[str] = Query(None),
    repo: DossierRepository = Depends(get_repository),
    resolver: QueryResolver = Depends(get_resolver),
):
    """
    Search the directory.

    Falls back to a localized archive summary when no name matches.
    """
    language = resolve_language(lang)
    profiles = await _profiles_for(repo, language)
    result = await resolver.resolve(q, profiles, language)
    return {
        'query': result.query,
        'profiles': [profile_view(p) for p in result.profiles],
        'ai_summary': result.ai_summary,
    }


@router.get("/status", response_model=StatusResponse)
async def status(request: Request):
    state = request.app.state
    return StatusResponse(
        backend_configured=state.repository.backend.is_configured,
        summarizer_configured=state.resolver.summarizer.is_configured,
        admin_enabled=getattr(state.authenticator, 'enabled', True),
        languages=list(SUPPORTED_LANGUAGES),
        default_language=state.settings.default_language,
    )


# =============================================================================
# Admin endpoints
# =============================================================================

@router.post("/admin/login", response_model=AdminLoginResponse)
async def admin_login(body: AdminLoginRequest, request: Request):
    try:
        session = request.app.state.authenticator.authenticate(body.secret)
    except AuthenticationError as e:
        raise HTTPException(status_code=401, detail=str(e))
    return AdminLoginResponse(authenticated=True, subject=session.subject)


@router.get("/dossiers/form/new")
async def blank_form(admin: AdminSession = Depends(require_admin)):
    return new_edit_form().to_dict()


@router.get("/dossiers/{dossier_id}/form")
async def edit_form(
    dossier_id: str,
    lang: Optional[str] = Query(None),
    repo: DossierRepository = Depends(get_repository),
    admin: AdminSession = Depends(require_admin),
):
    """Edit form for a dossier, with bio and timeline in the requested language"""
    language = resolve_language(lang)
    profile = await repo.get(dossier_id, language)
    if not profile:
        raise HTTPException(status_code=404, detail="Dossier not found")
    return edit_form_from_profile(profile, language).to_dict()


@router.post("/dossiers")
async def create_dossier(
    body: DossierEditRequest,
    lang: Optional[str] = Query(None),
    repo: DossierRepository = Depends(get_repository),
    admin: AdminSession = Depends(require_admin),
):
    profiles = await _save(repo, body, None, lang)
    return [profile_view(p) for p in profiles]


@router.put("/dossiers/{dossier_id}")
async def update_dossier(
    dossier_id: str,
    body: DossierEditRequest,
    lang: Optional[str] = Query(None),
    repo: DossierRepository = Depends(get_repository),
    admin: AdminSession = Depends(require_admin),
):
    profiles = await _save(repo, body, dossier_id, lang)
    return [profile_view(p) for p in profiles]


@router.delete("/dossiers/{dossier_id}")
async def delete_dossier(
    dossier_id: str,
    repo: DossierRepository = Depends(get_repository),
    admin: AdminSession = Depends(require_admin),
):
    try:
        profiles = await repo.delete(dossier_id)
    except BackendError as e:
        raise HTTPException(status_code=502, detail=f"Error deleting: {e.message}")
    return [profile_view(p) for p in profiles]


@router.post("/dossiers/images", response_model=UploadResponse)
async def upload_image(
    file: UploadFile = File(...),
    repo: DossierRepository = Depends(get_repository),
    admin: AdminSession = Depends(require_admin),
):
    content = await file.read()
    try:
        url = await repo.upload_image(file.filename or "", content, file.content_type)
    except BackendError as e:
        raise HTTPException(status_code=502, detail=f"Error uploading image: {e.message}")
    return UploadResponse(url=url)


async def _save(repo: DossierRepository, body: DossierEditRequest, dossier_id: Optional[str], lang: Optional[str]):
    try:
        return await repo.save(body.to_form(dossier_id), resolve_language(lang) if lang else None)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail={'field': e.field, 'message': e.message})
    except BackendError as e:
        raise HTTPException(status_code=502, detail=f"Failed to save dossier: {e.message}")
