from backend.auth.passwords import verify_password
from backend.models.contact_info import ContactInfo
from backend.models.faq import FAQ
from backend.models.global_office import GlobalOffice
from backend.models.service import Service
from backend.models.user import User
from backend.seed import count_records, seed_default_content, seed_demo_users


def test_seed_demo_users_creates_fixed_accounts(db_session) -> None:
    created = seed_demo_users(db_session)

    assert created == ['admin@assetmagnets.com', 'john@example.com', 'jane@example.com']
    admin = db_session.query(User).filter(User.email == 'admin@assetmagnets.com').one()
    assert admin.role == 'admin'
    assert verify_password('admin123', admin.password_hash)
    roles = {user.email: user.role for user in db_session.query(User).all()}
    assert roles['jane@example.com'] == 'instructor'


def test_seed_demo_users_is_repeatable(db_session) -> None:
    seed_demo_users(db_session)

    assert seed_demo_users(db_session) == []
    assert db_session.query(User).count() == 3


def test_seed_default_content_only_fills_empty_tables(db_session) -> None:
    db_session.add(FAQ(question='Existing?', answer='Yes.', order=9))
    db_session.commit()

    initialized = seed_default_content(db_session)

    assert initialized == ['services', 'contact_info', 'global_offices']
    assert db_session.query(Service).count() == 1
    assert db_session.query(ContactInfo).count() == 4
    assert db_session.query(GlobalOffice).count() == 3
    assert db_session.query(FAQ).count() == 1
    assert seed_default_content(db_session) == []


def test_seeded_service_keeps_price_tiers(db_session) -> None:
    seed_default_content(db_session)

    service = db_session.query(Service).one()

    assert (service.basic_price, service.premium_price, service.enterprise_price) == (5000, 15000, 50000)
    headquarters = db_session.query(GlobalOffice).filter(GlobalOffice.is_headquarters.is_(True)).one()
    assert headquarters.latitude == 37.7749


def test_count_records_reports_every_collection(db_session) -> None:
    seed_demo_users(db_session)
    seed_default_content(db_session)

    assert count_records(db_session) == {
        'services': 1,
        'contact_info': 4,
        'global_offices': 3,
        'faqs': 5,
        'users': 3,
        'courses': 0,
        'jobs': 0,
    }
