"""
Tests for the write path: edit forms -> stored rows.
"""
import pytest

from conftest import make_row
from models.domain.dossier import DossierEdit, ProfileStatus, VerificationLevel
from services.dossier_denormalizer import denormalize, edit_form_from_profile, new_edit_form
from services.dossier_normalizer import normalize
from services.errors import ValidationError


def test_requires_full_name():
    with pytest.raises(ValidationError) as exc_info:
        denormalize(DossierEdit(category='Politics'), 'en')
    assert exc_info.value.field == 'full_name'


def test_requires_category():
    with pytest.raises(ValidationError) as exc_info:
        denormalize(DossierEdit(full_name='Amina Yusuf'), 'en')
    assert exc_info.value.field == 'category'


def test_blank_values_count_as_missing():
    with pytest.raises(ValidationError):
        denormalize(DossierEdit(full_name='   ', category='Politics'), 'en')


def test_defaults_when_only_required_fields_given():
    row = denormalize(DossierEdit(full_name='Amina Yusuf', category='Politics'), 'en')

    assert row == {
        'full_name': 'Amina Yusuf',
        'category': 'Politics',
        'status': 'Unverified',
        'reputation_score': 0,
        'verification_level': 'Standard',
        'details': {},
    }


def test_category_is_written_verbatim():
    assert denormalize(DossierEdit(full_name='X', category='Sports'), 'en')['category'] == 'Sports'
    assert denormalize(DossierEdit(full_name='X', category='politics'), 'en')['category'] == 'politics'


def test_blank_category_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        denormalize(DossierEdit(full_name='X', category='  '), 'en')
    assert exc_info.value.field == 'category'


def test_invalid_status_and_level_are_rejected():
    with pytest.raises(ValidationError) as exc_info:
        denormalize(DossierEdit(full_name='X', category='History', status='Maybe'), 'en')
    assert exc_info.value.field == 'status'

    with pytest.raises(ValidationError) as exc_info:
        denormalize(DossierEdit(full_name='X', category='History', verification_level='Platinum'), 'en')
    assert exc_info.value.field == 'verification_level'


def test_malformed_details_are_rejected():
    form = DossierEdit(full_name='X', category='History', details={'status': 'GONE'})

    with pytest.raises(ValidationError):
        denormalize(form, 'en')


def test_full_bio_written_for_active_language_only():
    form = DossierEdit(
        full_name='Amina Yusuf',
        category='Politics',
        details={'fullBio': {'en': 'Old English text.'}},
        full_bio='Qoraal cusub.',
        timeline=[{'year': '2019', 'title': 'Wasiir', 'description': ''}],
    )

    row = denormalize(form, 'so')

    assert row['details']['fullBio'] == {'so': 'Qoraal cusub.'}
    assert row['details']['timeline'] == {'so': [{'year': '2019', 'title': 'Wasiir', 'description': ''}]}


def test_score_is_clamped():
    row = denormalize(DossierEdit(full_name='X', category='Business', reputation_score=140), 'en')

    assert row['reputation_score'] == 100


def test_new_edit_form_defaults():
    form = new_edit_form()

    assert form.id is None
    assert form.status == 'Unverified'
    assert form.reputation_score == 50
    assert form.verification_level == 'Standard'
    assert form.details == {'isOrganization': False, 'status': 'ACTIVE'}


# =============================================================================
# Round trip: Profile -> edit form -> row -> Profile
# =============================================================================

@pytest.mark.parametrize("language", ['en', 'so', 'ar'])
def test_round_trip_preserves_core_fields(language):
    original = normalize(make_row(), language)

    row = denormalize(edit_form_from_profile(original, language), language)
    row['id'] = original.id
    restored = normalize(row, language)

    assert restored.name == original.name
    assert restored.title == original.title
    assert restored.category == original.category
    assert restored.short_bio == original.short_bio
    assert restored.verified == original.verified
    assert restored.verification_level == original.verification_level
    assert restored.full_bio == original.full_bio
    assert restored.timeline == original.timeline
    assert restored.influence == original.influence


def test_round_trip_keeps_lifecycle_details():
    original = normalize(make_row(status='Unverified', details={
        'isOrganization': True,
        'status': 'CLOSED',
        'dateStart': '1985',
        'dateEnd': '2009',
        'location': 'Kismayo',
        'archives': [{'id': 'a1', 'type': 'AWARD', 'title': 'Prize', 'date': '1999'}],
        'influence': {'support': 40, 'neutral': 35, 'opposition': 25},
    }), 'en')

    form = edit_form_from_profile(original, 'en')
    row = denormalize(form, 'en')
    row['id'] = original.id
    restored = normalize(row, 'en')

    assert form.status == 'Unverified'
    assert restored.verified is False
    assert restored.is_organization is True
    assert restored.status == ProfileStatus.CLOSED
    assert restored.date_end == '2009'
    assert restored.location == 'Kismayo'
    assert restored.archives == original.archives
    assert restored.influence == original.influence
    assert restored.verification_level == VerificationLevel.GOLDEN


@pytest.mark.parametrize("stored", ['politics', 'Sports'])
def test_round_trip_keeps_legacy_category(stored):
    original = normalize(make_row(category=stored), 'en')

    row = denormalize(edit_form_from_profile(original, 'en'), 'en')
    row['id'] = original.id
    restored = normalize(row, 'en')

    assert row['category'] == stored
    assert restored.category == stored
    assert restored.category_label == original.category_label == 'Politics & Gov'
