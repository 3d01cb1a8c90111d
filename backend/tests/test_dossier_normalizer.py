"""
Tests for the read path: stored rows -> canonical Profiles.
"""
import logging

import pytest

from conftest import make_row
from models.domain.dossier import (
    InfluenceStats,
    ProfileStatus,
    RawDossierRecord,
    TimelineEvent,
    VerificationLevel,
)
from services.dossier_normalizer import normalize, normalize_all
from services.errors import ValidationError


# =============================================================================
# Field mapping
# =============================================================================

def test_copies_identity_fields(row):
    profile = normalize(row, 'en')

    assert profile.id == 'd-1'
    assert profile.name == 'Amina Yusuf'
    assert profile.title == 'Minister of Education'
    assert profile.category == 'Politics'
    assert profile.short_bio == 'Education reformer.'
    assert profile.image_url == 'https://cdn.test/amina.jpg'
    assert profile.language == 'en'


def test_accepts_raw_record_instances(row):
    record = RawDossierRecord.from_row(row)

    assert normalize(record, 'so').full_bio == 'Taariikh nololeed buuxda.'


@pytest.mark.parametrize("status,verified", [("Verified", True), ("Unverified", False), ("verified", False)])
def test_verified_flag(status, verified):
    assert normalize(make_row(status=status), 'en').verified is verified


def test_verification_level_is_independent_of_verified():
    profile = normalize(make_row(status='Unverified', verification_level='Hero'), 'en')

    assert profile.verified is False
    assert profile.verification_level == VerificationLevel.HERO
    assert profile.shows_verification_level is False


def test_unknown_verification_level_is_absent():
    assert normalize(make_row(verification_level='Platinum'), 'en').verification_level is None
    assert normalize(make_row(verification_level=None), 'en').verification_level is None


# =============================================================================
# Localization fallback chain
# =============================================================================

def test_full_bio_uses_requested_language(row):
    assert normalize(row, 'so').full_bio == 'Taariikh nololeed buuxda.'


def test_full_bio_falls_back_to_english(row):
    assert normalize(row, 'ar').full_bio == 'Full English biography.'


def test_full_bio_falls_back_to_plain_bio():
    row = make_row(details={'fullBio': {'so': 'Kaliya Soomaali.'}})

    assert normalize(row, 'ar').full_bio == 'Education reformer.'
    assert normalize(row, 'so').full_bio == 'Kaliya Soomaali.'


def test_empty_localized_bio_falls_through():
    row = make_row(details={'fullBio': {'so': '', 'en': 'English text.'}})

    assert normalize(row, 'so').full_bio == 'English text.'


def test_timeline_uses_requested_language_then_english():
    row = make_row(details={'timeline': {
        'en': [{'year': '1990', 'title': 'Founded', 'description': 'Opened.'}],
        'ar': [{'year': '1990', 'title': 'تأسست', 'description': 'افتتحت.'}],
    }})

    assert normalize(row, 'ar').timeline == [TimelineEvent('1990', 'تأسست', 'افتتحت.')]
    assert normalize(row, 'so').timeline == [TimelineEvent('1990', 'Founded', 'Opened.')]


def test_empty_timeline_for_language_falls_back_to_english():
    row = make_row(details={'timeline': {
        'so': [],
        'en': [{'year': '2000', 'title': 'Start'}],
    }})

    timeline = normalize(row, 'so').timeline
    assert [event.title for event in timeline] == ['Start']
    assert timeline[0].description == ''


def test_missing_timeline_is_empty():
    assert normalize(make_row(details={}), 'en').timeline == []


# =============================================================================
# Category labels
# =============================================================================

@pytest.mark.parametrize("language,label", [
    ('en', 'Business'),
    ('so', 'Ganacsiga'),
    ('ar', 'الأعمال'),
])
def test_category_label_is_localized(language, label):
    assert normalize(make_row(category='Business'), language).category_label == label


def test_unknown_category_uses_politics_label_but_keeps_raw_value():
    profile = normalize(make_row(category='Sports'), 'so')

    assert profile.category == 'Sports'
    assert profile.category_label == 'Siyaasadda'


def test_arts_category_matches_despite_spacing():
    profile = normalize(make_row(category='Arts&Culture'), 'en')

    assert profile.category == 'Arts&Culture'
    assert profile.category_label == 'Arts & Culture'


# =============================================================================
# Defaults and influence
# =============================================================================

def test_detail_defaults():
    profile = normalize(make_row(details=None), 'en')

    assert profile.location is None
    assert profile.archives == []
    assert profile.news == []
    assert profile.is_organization is False
    assert profile.status == ProfileStatus.ACTIVE
    assert profile.date_start == 'Unknown'
    assert profile.date_end is None
    assert profile.full_bio == 'Education reformer.'


def test_passes_through_lifecycle_details():
    row = make_row(details={
        'isOrganization': True,
        'status': 'closed',
        'dateStart': '1985',
        'dateEnd': '2009',
        'location': 'Kismayo',
        'archives': [{'id': 'a1', 'type': 'pdf', 'title': 'Charter', 'date': '1985'}],
        'news': [{'id': 'n1', 'title': 'Closure', 'source': 'Wire', 'date': '2009', 'summary': 'Closed.'}],
    })

    profile = normalize(row, 'en')

    assert profile.is_organization is True
    assert profile.status == ProfileStatus.CLOSED
    assert profile.date_start == '1985'
    assert profile.date_end == '2009'
    assert profile.location == 'Kismayo'
    assert profile.archives[0].type == 'PDF'
    assert profile.news[0].source == 'Wire'


def test_date_end_does_not_force_status():
    profile = normalize(make_row(details={'status': 'ACTIVE', 'dateEnd': '2001'}), 'en')

    assert profile.status == ProfileStatus.ACTIVE
    assert profile.date_end == '2001'


@pytest.mark.parametrize("score", [0, 35, 100])
def test_influence_derived_from_score(score):
    profile = normalize(make_row(reputation_score=score), 'en')

    assert profile.influence == InfluenceStats(support=score, neutral=100 - score, opposition=0)


def test_missing_score_counts_as_zero():
    assert normalize(make_row(reputation_score=None), 'en').influence == InfluenceStats(0, 100, 0)


def test_stored_influence_breakdown_wins():
    row = make_row(details={'influence': {'support': 50, 'neutral': 20, 'opposition': 30}})

    assert normalize(row, 'en').influence == InfluenceStats(50, 20, 30)


# =============================================================================
# Validation
# =============================================================================

@pytest.mark.parametrize("field", ['id', 'full_name', 'category'])
def test_missing_required_field_is_rejected(field):
    row = make_row()
    del row[field]

    with pytest.raises(ValidationError) as exc_info:
        normalize(row, 'en')
    assert exc_info.value.field == field


def test_blank_name_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        normalize(make_row(full_name='  '), 'en')
    assert exc_info.value.field == 'full_name'


@pytest.mark.parametrize("details,field", [
    ('not an object', 'details'),
    ({'fullBio': 'English only'}, 'details.fullBio'),
    ({'timeline': {'en': 'not a list'}}, 'details.timeline'),
    ({'archives': [{'id': 'a', 'type': 'VIDEO'}]}, 'details.archives'),
    ({'status': 'MISSING'}, 'details.status'),
])
def test_malformed_details_are_rejected(details, field):
    with pytest.raises(ValidationError) as exc_info:
        normalize(make_row(details=details), 'en')
    assert exc_info.value.field == field


def test_normalize_all_skips_invalid_rows_with_warning(caplog):
    rows = [
        make_row(id='ok-1'),
        make_row(id='bad-1', full_name=None),
        make_row(id='bad-2', details={'status': 'UNKNOWN'}),
        make_row(id='ok-2', full_name='Hodan Telecom'),
    ]

    with caplog.at_level(logging.WARNING):
        profiles = normalize_all(rows, 'en')

    assert [p.id for p in profiles] == ['ok-1', 'ok-2']
    assert 'bad-1' in caplog.text
    assert 'bad-2' in caplog.text
