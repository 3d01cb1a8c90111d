"""
Localized labels for the dossier directory (English, Somali, Arabic).

Only the labels the data layer resolves are kept here: category, lifecycle
status and verification tier labels, plus the archive summary fallbacks.
"""
from typing import Any, Dict, Optional

from models.domain.dossier import (
    SUPPORTED_LANGUAGES,
    DEFAULT_LANGUAGE,
    Category,
    Profile,
    ProfileStatus,
    VerificationLevel,
)

RTL_LANGUAGES = {'ar'}

LANGUAGE_NAMES = {
    'en': 'English',
    'so': 'Somali',
    'ar': 'Arabic',
}

CATEGORY_LABELS: Dict[str, Dict[Category, str]] = {
    'en': {
        Category.POLITICS: 'Politics & Gov',
        Category.BUSINESS: 'Business',
        Category.HISTORY: 'History',
        Category.ARTS: 'Arts & Culture',
    },
    'so': {
        Category.POLITICS: 'Siyaasadda',
        Category.BUSINESS: 'Ganacsiga',
        Category.HISTORY: 'Taariikhda',
        Category.ARTS: 'Fanka & Dhaqanka',
    },
    'ar': {
        Category.POLITICS: 'السياسة والحكومة',
        Category.BUSINESS: 'الأعمال',
        Category.HISTORY: 'التاريخ',
        Category.ARTS: 'الفنون والثقافة',
    },
}

STATUS_LABELS: Dict[str, Dict[ProfileStatus, str]] = {
    'en': {
        ProfileStatus.ACTIVE: 'Active',
        ProfileStatus.DECEASED: 'Deceased',
        ProfileStatus.RETIRED: 'Retired',
        ProfileStatus.CLOSED: 'Closed',
    },
    'so': {
        ProfileStatus.ACTIVE: 'Firfircoon',
        ProfileStatus.DECEASED: 'Dhintay',
        ProfileStatus.RETIRED: 'Hawlgab',
        ProfileStatus.CLOSED: 'Xiran',
    },
    'ar': {
        ProfileStatus.ACTIVE: 'نشط',
        ProfileStatus.DECEASED: 'متوفى',
        ProfileStatus.RETIRED: 'متقاعد',
        ProfileStatus.CLOSED: 'مغلق',
    },
}

VERIFICATION_LABELS: Dict[str, Dict[Optional[VerificationLevel], str]] = {
    'en': {
        VerificationLevel.HERO: 'National Hero',
        VerificationLevel.GOLDEN: 'Golden Verified',
        VerificationLevel.STANDARD: 'Verified',
        None: 'Unverified',
    },
    'so': {
        VerificationLevel.HERO: 'Halgamaa Qaran',
        VerificationLevel.GOLDEN: 'Xaqiijin Dahabi ah',
        VerificationLevel.STANDARD: 'La Xaqiijiyay',
        None: 'Lama Xaqiijin',
    },
    'ar': {
        VerificationLevel.HERO: 'بطل وطني',
        VerificationLevel.GOLDEN: 'توثيق ذهبي',
        VerificationLevel.STANDARD: 'موثق',
        None: 'غير موثق',
    },
}

# Archive summary fallbacks
SUMMARY_UNAVAILABLE = {
    'en': "The archive intelligence service is currently unavailable (API Key missing).",
    'so': "Adeegga sirdoonka kaydka hadda ma shaqaynayo (Furaha API ayaa maqan).",
    'ar': "خدمة ذكاء الأرشيف غير متاحة حاليًا (مفتاح API مفقود).",
}
SUMMARY_FAILED = "The archive service is currently unavailable. Please try again later."
SUMMARY_EMPTY = "No records found in the archive at this time."


def resolve_language(code: Optional[str]) -> str:
    """Coerce a language code to a supported one (English by default)"""
    if code:
        code = code.strip().lower()
        if code in SUPPORTED_LANGUAGES:
            return code
    return DEFAULT_LANGUAGE


def text_direction(language: str) -> str:
    return 'rtl' if resolve_language(language) in RTL_LANGUAGES else 'ltr'


def category_label(category: Optional[str], language: str) -> str:
    """
    Display label for a stored category string.

    Unrecognized categories get the Politics label.
    """
    labels = CATEGORY_LABELS[resolve_language(language)]
    return labels[Category.parse(category) or Category.POLITICS]


def status_label(status: ProfileStatus, language: str) -> str:
    return STATUS_LABELS[resolve_language(language)][status]


def verification_label(level: Optional[VerificationLevel], language: str) -> str:
    return VERIFICATION_LABELS[resolve_language(language)][level]


def unavailable_message(language: Optional[str]) -> str:
    return SUMMARY_UNAVAILABLE[resolve_language(language)]


def profile_view(profile: Profile) -> Dict[str, Any]:
    """
    Profile as served to the directory screens.

    Adds the localized lifecycle and tier labels, whether the tier badge is
    shown, and the text direction of the profile's language.
    """
    if profile.verified:
        level = profile.verification_level or VerificationLevel.STANDARD
    else:
        level = None
    view = profile.to_dict()
    view.update({
        'status_label': status_label(profile.status, profile.language),
        'verification_label': verification_label(level, profile.language),
        'show_verification_level': profile.shows_verification_level,
        'direction': text_direction(profile.language),
    })
    return view
