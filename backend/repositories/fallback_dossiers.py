"""
Bundled fallback dossiers

Served whenever no usable backend data exists (demo mode, empty table, or a
failed fetch). Stored as raw rows so they go through the same normalizer as
live data and resolve to the requested language like any other dossier.
"""
import copy
from typing import Any, Dict, List

FALLBACK_DOSSIERS: List[Dict[str, Any]] = [
    {
        'id': 'fallback-amina-yusuf',
        'full_name': 'Amina Yusuf',
        'role': 'Minister of Education',
        'bio': 'Education reformer who led the national literacy campaign.',
        'status': 'Verified',
        'reputation_score': 82,
        'image_url': '/static/dossiers/amina-yusuf.jpg',
        'category': 'Politics',
        'verification_level': 'Golden',
        'details': {
            'fullBio': {
                'en': (
                    'Amina Yusuf began her career as a schoolteacher in Baidoa before joining '
                    'the civil service. As Minister of Education she oversaw the national '
                    'literacy campaign and the first standardized secondary curriculum.'
                ),
                'so': (
                    'Amina Yusuf waxay shaqadeeda ka bilowday macallimad dugsi oo ku taal Baydhabo '
                    'ka hor inta aysan ku biirin shaqada dowladda. Iyadoo ah Wasiirka Waxbarashada '
                    'waxay hoggaamisay ololaha qaranka ee akhris-qorista.'
                ),
                'ar': (
                    'بدأت أمينة يوسف مسيرتها معلمة في بيدوا قبل أن تنضم إلى الخدمة المدنية. '
                    'وبصفتها وزيرة للتعليم أشرفت على الحملة الوطنية لمحو الأمية.'
                ),
            },
            'timeline': {
                'en': [
                    {'year': '1998', 'title': 'Teacher, Baidoa', 'description': 'Taught mathematics at a secondary school.'},
                    {'year': '2012', 'title': 'Director of Curriculum', 'description': 'Drafted the national secondary curriculum.'},
                    {'year': '2019', 'title': 'Minister of Education', 'description': 'Launched the national literacy campaign.'},
                ],
                'so': [
                    {'year': '1998', 'title': 'Macallimad, Baydhabo', 'description': 'Waxay dhigi jirtay xisaabta dugsi sare.'},
                    {'year': '2012', 'title': 'Agaasimaha Manhajka', 'description': 'Waxay diyaarisay manhajka qaranka ee dugsiyada sare.'},
                    {'year': '2019', 'title': 'Wasiirka Waxbarashada', 'description': 'Waxay bilowday ololaha qaranka ee akhris-qorista.'},
                ],
            },
            'isOrganization': False,
            'status': 'ACTIVE',
            'dateStart': '1974',
            'location': 'Mogadishu',
            'archives': [
                {'id': 'ay-1', 'type': 'PDF', 'title': 'Literacy Campaign Report', 'date': '2021', 'size': '2.4 MB'},
                {'id': 'ay-2', 'type': 'AWARD', 'title': 'National Service Medal', 'date': '2022'},
            ],
            'news': [
                {
                    'id': 'ay-n1',
                    'title': 'Literacy rates rise in rural districts',
                    'source': 'Horn Observer',
                    'date': '2023-04-12',
                    'summary': 'Ministry figures show gains in districts covered by the campaign.',
                },
            ],
        },
    },
    {
        'id': 'fallback-hodan-telecom',
        'full_name': 'Hodan Telecom Group',
        'role': 'Telecommunications Provider',
        'bio': 'Mobile network and money-transfer operator founded in Hargeisa.',
        'status': 'Verified',
        'reputation_score': 74,
        'image_url': '/static/dossiers/hodan-telecom.jpg',
        'category': 'Business',
        'verification_level': 'Standard',
        'details': {
            'fullBio': {
                'en': (
                    'Hodan Telecom Group started as a single call centre and grew into a '
                    'regional mobile operator with a mobile-money service used by small traders.'
                ),
                'ar': (
                    'بدأت مجموعة هودان للاتصالات كمركز اتصال واحد ثم أصبحت مشغلاً إقليمياً '
                    'للهاتف المحمول مع خدمة للأموال عبر الهاتف.'
                ),
            },
            'timeline': {
                'en': [
                    {'year': '2002', 'title': 'Founded', 'description': 'Opened its first call centre in Hargeisa.'},
                    {'year': '2010', 'title': 'Mobile money launch', 'description': 'Introduced phone-based payments.'},
                ],
            },
            'isOrganization': True,
            'status': 'ACTIVE',
            'dateStart': '2002',
            'location': 'Hargeisa',
        },
    },
    {
        'id': 'fallback-cabdi-nuur',
        'full_name': 'Cabdi Nuur Xasan',
        'role': 'Independence-era Poet',
        'bio': 'Poet whose verses were recited at the 1960 independence celebrations.',
        'status': 'Verified',
        'reputation_score': 91,
        'image_url': '/static/dossiers/cabdi-nuur.jpg',
        'category': 'History',
        'verification_level': 'Hero',
        'details': {
            'fullBio': {
                'en': (
                    'Cabdi Nuur Xasan composed poems on unity and self-rule that circulated by '
                    'radio and word of mouth in the years before independence.'
                ),
                'so': (
                    'Cabdi Nuur Xasan wuxuu tiriyay gabayo ku saabsan midnimada iyo is-xukunka '
                    'kuwaas oo lagu faafin jiray raadiyaha sannadihii xorriyadda ka horreeyay.'
                ),
                'ar': (
                    'نظم عبدي نور حسن قصائد عن الوحدة والحكم الذاتي انتشرت عبر الإذاعة '
                    'في السنوات التي سبقت الاستقلال.'
                ),
            },
            'timeline': {
                'en': [
                    {'year': '1955', 'title': 'First recordings', 'description': 'Poems broadcast on regional radio.'},
                    {'year': '1960', 'title': 'Independence recital', 'description': 'Recited at the national celebrations.'},
                ],
                'ar': [
                    {'year': '1955', 'title': 'أول التسجيلات', 'description': 'بُثت قصائده عبر الإذاعة الإقليمية.'},
                    {'year': '1960', 'title': 'إلقاء الاستقلال', 'description': 'ألقى قصائده في الاحتفالات الوطنية.'},
                ],
            },
            'isOrganization': False,
            'status': 'DECEASED',
            'dateStart': '1921',
            'dateEnd': '1987',
            'location': 'Burao',
            'archives': [
                {'id': 'cn-1', 'type': 'IMAGE', 'title': 'Recital photograph', 'date': '1960'},
            ],
        },
    },
    {
        'id': 'fallback-maryan-cali',
        'full_name': 'Maryan Cali',
        'role': 'Singer and Composer',
        'bio': 'Vocalist known for modern arrangements of traditional songs.',
        'status': 'Unverified',
        'reputation_score': 65,
        'image_url': '/static/dossiers/maryan-cali.jpg',
        'category': 'Arts & Culture',
        'verification_level': 'Standard',
        'details': {
            'isOrganization': False,
            'status': 'RETIRED',
            'dateStart': '1968',
            'location': 'Djibouti',
        },
    },
    {
        'id': 'fallback-juba-fisheries',
        'full_name': 'Juba Fisheries Cooperative',
        'role': 'Fishing Cooperative',
        'bio': 'Coastal cooperative that pooled boats and cold storage for small fishers.',
        'status': 'Verified',
        'reputation_score': 58,
        'image_url': '/static/dossiers/juba-fisheries.jpg',
        'category': 'Business',
        'verification_level': 'Standard',
        'details': {
            'fullBio': {
                'so': (
                    'Iskaashatada Kalluumaysiga Jubba waxay isku keentay doonyaha iyo qaboojiyeyaasha '
                    'kalluumaystayaasha yaryar ee xeebta.'
                ),
            },
            'isOrganization': True,
            'status': 'CLOSED',
            'dateStart': '1985',
            'dateEnd': '2009',
            'location': 'Kismayo',
        },
    },
]


def get_fallback_rows() -> List[Dict[str, Any]]:
    """Fresh copy of the bundled rows (callers may mutate it)"""
    return copy.deepcopy(FALLBACK_DOSSIERS)
