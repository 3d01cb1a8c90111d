"""
Dossier Denormalizer - write path

Turns an admin edit form back into the row shape the dossiers table expects,
and builds edit forms from existing Profiles.

Localized text is written for the active language only: editing through the
admin form is not multi-language complete.
"""
from typing import Any, Dict, Optional

from models.domain.dossier import (
    DossierDetails,
    DossierEdit,
    InfluenceStats,
    Profile,
    ProfileStatus,
    VerificationLevel,
    VerificationStatus,
    parse_score,
)
from services.errors import ValidationError

DEFAULT_STATUS = VerificationStatus.UNVERIFIED.value
DEFAULT_SCORE = 0
DEFAULT_LEVEL = VerificationLevel.STANDARD.value

# Blank-form defaults for a new dossier
NEW_FORM_SCORE = 50


def denormalize(form: DossierEdit, language: str) -> Dict[str, Any]:
    """
    Build the insert/update payload for an edit form.

    Args:
        form: partial edit form
        language: language active while editing

    Returns:
        Row dict (without id) ready for insert or update

    Raises:
        ValidationError: if full_name or category is missing, or another
            field has an invalid value. Nothing is written in that case.
    """
    full_name = _text(form.full_name)
    if not full_name:
        raise ValidationError('full_name', "Name and Category are required")

    # Stored verbatim; unrecognized categories only affect the display label
    category = form.category
    if not _text(category):
        raise ValidationError('category', "Name and Category are required")

    status = _text(form.status) or DEFAULT_STATUS
    if status not in (VerificationStatus.VERIFIED.value, VerificationStatus.UNVERIFIED.value):
        raise ValidationError('status', f"Unknown verification status: {status!r}")

    level_value = _text(form.verification_level) or DEFAULT_LEVEL
    level = VerificationLevel.parse(level_value)
    if level is None:
        raise ValidationError('verification_level', f"Unknown verification level: {level_value!r}")

    details = dict(form.details or {})
    if form.full_bio is not None:
        details['fullBio'] = {language: form.full_bio}
    if form.timeline is not None:
        details['timeline'] = {language: list(form.timeline)}

    row: Dict[str, Any] = {
        'full_name': full_name,
        'role': form.role,
        'bio': form.bio,
        'status': status,
        'reputation_score': parse_score(form.reputation_score) if form.reputation_score is not None else DEFAULT_SCORE,
        'image_url': form.image_url,
        'category': category,
        'verification_level': level.value,
        'details': DossierDetails.from_dict(details).to_dict(),
    }
    # Unset optional columns are left out so updates don't clear them
    return {key: value for key, value in row.items() if value is not None}


def edit_form_from_profile(profile: Profile, language: str) -> DossierEdit:
    """Edit form for an existing Profile (the read path, reversed)"""
    details: Dict[str, Any] = {
        'isOrganization': profile.is_organization,
        'status': profile.status.value,
        'dateStart': profile.date_start,
    }
    if profile.date_end:
        details['dateEnd'] = profile.date_end
    if profile.location:
        details['location'] = profile.location
    if profile.archives:
        details['archives'] = [a.to_dict() for a in profile.archives]
    if profile.news:
        details['news'] = [n.to_dict() for n in profile.news]
    if profile.influence != InfluenceStats.from_score(profile.influence.support):
        details['influence'] = profile.influence.to_dict()

    return DossierEdit(
        id=profile.id,
        full_name=profile.name,
        role=profile.title,
        bio=profile.short_bio,
        status=(VerificationStatus.VERIFIED if profile.verified else VerificationStatus.UNVERIFIED).value,
        reputation_score=profile.influence.support,
        image_url=profile.image_url,
        category=profile.category,
        verification_level=profile.verification_level.value if profile.verification_level else None,
        details=details,
        full_bio=profile.full_bio,
        timeline=[event.to_dict() for event in profile.timeline],
    )


def new_edit_form() -> DossierEdit:
    """Blank form for a new dossier"""
    return DossierEdit(
        status=DEFAULT_STATUS,
        reputation_score=NEW_FORM_SCORE,
        verification_level=DEFAULT_LEVEL,
        details={'isOrganization': False, 'status': ProfileStatus.ACTIVE.value},
    )


def _text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None
