"""
Dossier Normalizer - read path

Turns stored dossier rows into canonical Profiles for one language.

Localization fallback chain:
- full bio: details.fullBio[lang] -> details.fullBio['en'] -> plain bio
- timeline: details.timeline[lang] -> details.timeline['en'] -> []

Pure functions: the language is always an explicit argument.
"""
import logging
from typing import Any, Iterable, List, Mapping, Union

from models.domain.dossier import (
    DEFAULT_LANGUAGE,
    InfluenceStats,
    Profile,
    ProfileStatus,
    RawDossierRecord,
    VerificationLevel,
    VerificationStatus,
)
from services.errors import ValidationError
from services.localization import category_label

logger = logging.getLogger(__name__)

RecordLike = Union[RawDossierRecord, Mapping[str, Any]]


def normalize(record: RecordLike, language: str) -> Profile:
    """
    Build the canonical Profile for a stored record.

    Args:
        record: RawDossierRecord or a raw row dict
        language: requested language code

    Raises:
        ValidationError: if the row is missing id, full_name or category,
            or a details field has the wrong shape
    """
    if not isinstance(record, RawDossierRecord):
        record = RawDossierRecord.from_row(record)

    details = record.details

    full_bio = (
        details.full_bio.get(language)
        or details.full_bio.get(DEFAULT_LANGUAGE)
        or record.bio
    )
    timeline = (
        details.timeline.get(language)
        or details.timeline.get(DEFAULT_LANGUAGE)
        or []
    )

    # A stored breakdown wins over the one derived from the score
    influence = details.influence or InfluenceStats.from_score(record.reputation_score)

    return Profile(
        id=record.id,
        name=record.full_name,
        title=record.role,
        category=record.category,
        category_label=category_label(record.category, language),
        verified=record.status == VerificationStatus.VERIFIED.value,
        verification_level=VerificationLevel.parse(record.verification_level),
        image_url=record.image_url,
        short_bio=record.bio,
        full_bio=full_bio,
        language=language,
        timeline=list(timeline),
        location=details.location,
        archives=list(details.archives),
        news=list(details.news),
        influence=influence,
        is_organization=bool(details.is_organization),
        status=details.status or ProfileStatus.ACTIVE,
        date_start=details.date_start or "Unknown",
        date_end=details.date_end,
    )


def normalize_all(rows: Iterable[RecordLike], language: str) -> List[Profile]:
    """
    Normalize a batch, skipping invalid rows.

    Each skipped row is logged as a warning; one bad row never aborts the batch.
    """
    profiles = []
    for row in rows:
        try:
            profiles.append(normalize(row, language))
        except ValidationError as e:
            logger.warning(f"Skipping dossier {_row_id(row)}: {e.message} ({e.field})")
    return profiles


def _row_id(row: Any) -> str:
    if isinstance(row, RawDossierRecord):
        return row.id
    if isinstance(row, Mapping) and row.get('id') is not None:
        return str(row['id'])
    return '<no id>'
