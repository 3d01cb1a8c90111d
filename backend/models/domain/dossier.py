"""
Dossier domain models

Two shapes of the same directory entry:
- RawDossierRecord: the row stored remotely (dossiers table), with a typed
  `details` block instead of an open JSON bag
- Profile: the canonical, language-resolved model used by presentation

Profiles are derived, never persisted. They are rebuilt on every fetch and
whenever the active language changes.
"""
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Literal, Mapping, Optional

from services.errors import ValidationError


Language = Literal["en", "so", "ar"]
SUPPORTED_LANGUAGES = ("en", "so", "ar")
DEFAULT_LANGUAGE: Language = "en"


class Category(str, Enum):
    POLITICS = "Politics"
    BUSINESS = "Business"
    HISTORY = "History"
    ARTS = "Arts & Culture"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional['Category']:
        """Match a stored category string, tolerating case and spacing drift"""
        if not value:
            return None
        key = "".join(value.split()).lower()
        for member in cls:
            if key in ("".join(member.value.split()).lower(), member.name.lower()):
                return member
        return None


class VerificationLevel(str, Enum):
    GOLDEN = "Golden"   # High-level elite
    HERO = "Hero"       # Martyrs and heroes (Halgamaayaal)
    STANDARD = "Standard"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional['VerificationLevel']:
        if not value:
            return None
        for member in cls:
            if value.strip().lower() == member.value.lower():
                return member
        return None


class ProfileStatus(str, Enum):
    ACTIVE = "ACTIVE"
    DECEASED = "DECEASED"
    RETIRED = "RETIRED"
    CLOSED = "CLOSED"


class VerificationStatus(str, Enum):
    VERIFIED = "Verified"
    UNVERIFIED = "Unverified"


ARCHIVE_TYPES = ("PDF", "IMAGE", "AWARD")


# =============================================================================
# Nested detail items
# =============================================================================

@dataclass(frozen=True)
class TimelineEvent:
    year: str
    title: str
    description: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> 'TimelineEvent':
        if not isinstance(data, Mapping) or not data.get('title'):
            raise ValidationError('details.timeline', "Timeline entries need at least a title")
        return cls(
            year=str(data.get('year') or ''),
            title=str(data['title']),
            description=str(data.get('description') or ''),
        )

    def to_dict(self) -> dict:
        return {'year': self.year, 'title': self.title, 'description': self.description}


@dataclass(frozen=True)
class ArchiveItem:
    id: str
    type: str  # PDF | IMAGE | AWARD
    title: str
    date: str
    size: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> 'ArchiveItem':
        if not isinstance(data, Mapping):
            raise ValidationError('details.archives', "Archive entries must be objects")
        item_type = str(data.get('type') or '').upper()
        if item_type not in ARCHIVE_TYPES:
            raise ValidationError('details.archives', f"Unknown archive type: {data.get('type')!r}")
        return cls(
            id=str(data.get('id') or ''),
            type=item_type,
            title=str(data.get('title') or ''),
            date=str(data.get('date') or ''),
            size=data.get('size'),
        )

    def to_dict(self) -> dict:
        result = {'id': self.id, 'type': self.type, 'title': self.title, 'date': self.date}
        if self.size is not None:
            result['size'] = self.size
        return result


@dataclass(frozen=True)
class NewsItem:
    id: str
    title: str
    source: str
    date: str
    summary: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> 'NewsItem':
        if not isinstance(data, Mapping):
            raise ValidationError('details.news', "News entries must be objects")
        return cls(
            id=str(data.get('id') or ''),
            title=str(data.get('title') or ''),
            source=str(data.get('source') or ''),
            date=str(data.get('date') or ''),
            summary=str(data.get('summary') or ''),
        )

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'title': self.title,
            'source': self.source,
            'date': self.date,
            'summary': self.summary,
        }


@dataclass(frozen=True)
class InfluenceStats:
    """Support/neutral/opposition percentages"""
    support: int
    neutral: int
    opposition: int = 0

    @classmethod
    def from_score(cls, score: int) -> 'InfluenceStats':
        """Derive the breakdown from a single reputation score"""
        return cls(support=score, neutral=100 - score, opposition=0)

    @classmethod
    def from_dict(cls, data: Any) -> 'InfluenceStats':
        if not isinstance(data, Mapping):
            raise ValidationError('details.influence', "Influence must be an object")
        try:
            return cls(
                support=int(data.get('support', 0)),
                neutral=int(data.get('neutral', 0)),
                opposition=int(data.get('opposition', 0)),
            )
        except (TypeError, ValueError):
            raise ValidationError('details.influence', "Influence values must be numbers")

    def to_dict(self) -> dict:
        return {'support': self.support, 'neutral': self.neutral, 'opposition': self.opposition}


# =============================================================================
# Raw (stored) record
# =============================================================================

def _localized_map(raw: Any, field_name: str) -> Dict[str, Any]:
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise ValidationError(field_name, f"{field_name} must map language codes to values")
    return {str(lang): value for lang, value in raw.items()}


def _item_list(raw: Any, field_name: str) -> list:
    if raw is None:
        return []
    if not isinstance(raw, (list, tuple)):
        raise ValidationError(field_name, f"{field_name} must be a list")
    return list(raw)


@dataclass
class DossierDetails:
    """
    Typed form of the `details` JSON column.

    Wire keys are camelCase (fullBio, isOrganization, dateStart, ...), matching
    what the admin screen has always written.
    """
    full_bio: Dict[str, str] = field(default_factory=dict)
    timeline: Dict[str, List[TimelineEvent]] = field(default_factory=dict)
    is_organization: Optional[bool] = None
    status: Optional[ProfileStatus] = None
    date_start: Optional[str] = None
    date_end: Optional[str] = None
    location: Optional[str] = None
    archives: List[ArchiveItem] = field(default_factory=list)
    news: List[NewsItem] = field(default_factory=list)
    influence: Optional[InfluenceStats] = None

    @classmethod
    def from_dict(cls, data: Any) -> 'DossierDetails':
        """
        Parse and validate a raw details block.

        Raises:
            ValidationError: if any field has the wrong shape
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ValidationError('details', "details must be an object")

        full_bio = {
            lang: str(text)
            for lang, text in _localized_map(data.get('fullBio'), 'details.fullBio').items()
            if text is not None
        }

        timeline = {}
        for lang, events in _localized_map(data.get('timeline'), 'details.timeline').items():
            timeline[lang] = [
                TimelineEvent.from_dict(event)
                for event in _item_list(events, 'details.timeline')
            ]

        status = None
        if data.get('status'):
            try:
                status = ProfileStatus(str(data['status']).upper())
            except ValueError:
                raise ValidationError('details.status', f"Unknown lifecycle status: {data['status']!r}")

        influence = None
        if data.get('influence') is not None:
            influence = InfluenceStats.from_dict(data['influence'])

        is_organization = data.get('isOrganization')

        return cls(
            full_bio=full_bio,
            timeline=timeline,
            is_organization=bool(is_organization) if is_organization is not None else None,
            status=status,
            date_start=data.get('dateStart') or None,
            date_end=data.get('dateEnd') or None,
            location=data.get('location') or None,
            archives=[ArchiveItem.from_dict(a) for a in _item_list(data.get('archives'), 'details.archives')],
            news=[NewsItem.from_dict(n) for n in _item_list(data.get('news'), 'details.news')],
            influence=influence,
        )

    def to_dict(self) -> dict:
        """Serialize back to the wire shape, omitting unset fields"""
        result: Dict[str, Any] = {}
        if self.full_bio:
            result['fullBio'] = dict(self.full_bio)
        if self.timeline:
            result['timeline'] = {
                lang: [event.to_dict() for event in events]
                for lang, events in self.timeline.items()
            }
        if self.is_organization is not None:
            result['isOrganization'] = self.is_organization
        if self.status is not None:
            result['status'] = self.status.value
        if self.date_start:
            result['dateStart'] = self.date_start
        if self.date_end:
            result['dateEnd'] = self.date_end
        if self.location:
            result['location'] = self.location
        if self.archives:
            result['archives'] = [a.to_dict() for a in self.archives]
        if self.news:
            result['news'] = [n.to_dict() for n in self.news]
        if self.influence is not None:
            result['influence'] = self.influence.to_dict()
        return result


@dataclass
class RawDossierRecord:
    """
    Dossier row as stored remotely.

    Storage: Supabase (dossiers table + details JSONB column)
    """
    id: str
    full_name: str
    category: str
    role: str = ""
    bio: str = ""
    status: str = VerificationStatus.UNVERIFIED.value
    reputation_score: int = 0
    image_url: str = ""
    verification_level: Optional[str] = None
    details: DossierDetails = field(default_factory=DossierDetails)
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> 'RawDossierRecord':
        """
        Build a record from a database row.

        Raises:
            ValidationError: naming the first missing required field
                (id, full_name, category) or the first malformed one
        """
        if not isinstance(row, Mapping):
            raise ValidationError('record', "Dossier rows must be objects")

        for required in ('id', 'full_name', 'category'):
            value = row.get(required)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise ValidationError(required)

        return cls(
            id=str(row['id']),
            full_name=str(row['full_name']),
            category=str(row['category']),
            role=str(row.get('role') or ''),
            bio=str(row.get('bio') or ''),
            status=str(row.get('status') or VerificationStatus.UNVERIFIED.value),
            reputation_score=parse_score(row.get('reputation_score')),
            image_url=str(row.get('image_url') or ''),
            verification_level=row.get('verification_level') or None,
            details=DossierDetails.from_dict(row.get('details')),
            created_at=row.get('created_at'),
        )


def parse_score(value: Any) -> int:
    """Coerce a reputation score to an int percentage in [0, 100]"""
    if value is None or value == '':
        return 0
    if isinstance(value, bool):
        raise ValidationError('reputation_score', "reputation_score must be a number")
    try:
        score = int(round(float(value)))
    except (TypeError, ValueError):
        raise ValidationError('reputation_score', "reputation_score must be a number")
    return max(0, min(100, score))


# =============================================================================
# Canonical profile
# =============================================================================

@dataclass(frozen=True)
class Profile:
    """
    Canonical, language-resolved dossier.

    `category` keeps the stored string unchanged; `category_label` is the
    display label for the language the profile was built for.
    """
    id: str
    name: str
    title: str
    category: str
    category_label: str
    verified: bool
    image_url: str
    short_bio: str
    full_bio: str
    language: str = DEFAULT_LANGUAGE
    verification_level: Optional[VerificationLevel] = None
    timeline: List[TimelineEvent] = field(default_factory=list)
    location: Optional[str] = None
    archives: List[ArchiveItem] = field(default_factory=list)
    news: List[NewsItem] = field(default_factory=list)
    influence: InfluenceStats = field(default_factory=lambda: InfluenceStats(0, 100, 0))
    is_organization: bool = False
    status: ProfileStatus = ProfileStatus.ACTIVE
    date_start: str = "Unknown"
    date_end: Optional[str] = None

    @property
    def shows_verification_level(self) -> bool:
        """The tier badge is only shown on verified profiles"""
        return self.verified and self.verification_level is not None

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'title': self.title,
            'category': self.category,
            'category_label': self.category_label,
            'verified': self.verified,
            'verification_level': self.verification_level.value if self.verification_level else None,
            'image_url': self.image_url,
            'short_bio': self.short_bio,
            'full_bio': self.full_bio,
            'language': self.language,
            'timeline': [event.to_dict() for event in self.timeline],
            'location': self.location,
            'archives': [a.to_dict() for a in self.archives],
            'news': [n.to_dict() for n in self.news],
            'influence': self.influence.to_dict(),
            'is_organization': self.is_organization,
            'status': self.status.value,
            'date_start': self.date_start,
            'date_end': self.date_end,
        }


# =============================================================================
# Admin edit form
# =============================================================================

@dataclass
class DossierEdit:
    """
    In-progress admin edit form. Every field is optional until save.

    `details` uses the wire (camelCase) shape. `full_bio` and `timeline`
    hold the text for the language active while editing.
    """
    id: Optional[str] = None
    full_name: Optional[str] = None
    role: Optional[str] = None
    bio: Optional[str] = None
    status: Optional[str] = None
    reputation_score: Optional[int] = None
    image_url: Optional[str] = None
    category: Optional[str] = None
    verification_level: Optional[str] = None
    details: Optional[Dict[str, Any]] = None
    full_bio: Optional[str] = None
    timeline: Optional[List[Dict[str, Any]]] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class SearchResult:
    """Outcome of a directory search"""
    query: str
    profiles: List[Profile] = field(default_factory=list)
    ai_summary: Optional[str] = None
