from datetime import datetime

import pytest
from sqlalchemy.exc import OperationalError

from backend.routes import service_routes
from backend.routes.crud import CrudResource

SERVICE_PAYLOAD = {
    'title': 'Computer Vision',
    'short_description': 'Image understanding',
    'description': 'Detection, segmentation and inspection pipelines.',
    'features': ['Detection', 'Segmentation'],
    'category': 'Engineering',
    'status': 'ACTIVE',
    'price': {'basic': 1000, 'premium': 2500, 'enterprise': 9000},
    'rating': 4.5,
}


def test_create_then_list_service_round_trips_fields(client, editor_headers) -> None:
    created = client.post('/api/services', json=SERVICE_PAYLOAD, headers=editor_headers)

    assert created.status_code == 201
    record = created.json()['data']
    assert record['id']
    assert record['created_at'] and record['updated_at']
    assert record['status'] == 'active'
    assert record['price'] == {'basic': 1000, 'premium': 2500, 'enterprise': 9000}
    assert record['icon'] == '🛠️'

    listed = client.get('/api/services').json()['data']
    assert [item['id'] for item in listed] == [record['id']]
    assert listed[0]['features'] == ['Detection', 'Segmentation']
    assert listed[0]['title'] == 'Computer Vision'


def test_update_service_changes_only_given_fields(client, editor_headers) -> None:
    record = client.post('/api/services', json=SERVICE_PAYLOAD, headers=editor_headers).json()['data']

    response = client.put(
        f"/api/services/{record['id']}",
        json={'status': 'draft', 'price': {'basic': 10, 'premium': 20, 'enterprise': 30}},
        headers=editor_headers,
    )

    assert response.status_code == 200
    updated = response.json()['data']
    assert updated['status'] == 'draft'
    assert updated['price'] == {'basic': 10, 'premium': 20, 'enterprise': 30}
    assert updated['title'] == 'Computer Vision'


def test_update_service_price_changes_only_given_tiers(client, editor_headers) -> None:
    record = client.post('/api/services', json=SERVICE_PAYLOAD, headers=editor_headers).json()['data']

    response = client.put(
        f"/api/services/{record['id']}",
        json={'price': {'basic': 1200}},
        headers=editor_headers,
    )

    assert response.status_code == 200
    assert response.json()['data']['price'] == {'basic': 1200, 'premium': 2500, 'enterprise': 9000}

    empty_price = client.put(f"/api/services/{record['id']}", json={'price': {}}, headers=editor_headers)

    assert empty_price.status_code == 200
    assert empty_price.json()['data']['price']['basic'] == 1200


def test_content_writes_require_staff_role(client, student_headers) -> None:
    assert client.post('/api/services', json=SERVICE_PAYLOAD).status_code == 401
    assert client.post('/api/services', json=SERVICE_PAYLOAD, headers=student_headers).status_code == 403


def test_missing_required_field_returns_400(client, admin_headers) -> None:
    payload = {key: value for key, value in SERVICE_PAYLOAD.items() if key != 'title'}

    response = client.post('/api/services', json=payload, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()['success'] is False
    assert 'title' in response.json()['message']


def test_unknown_ids_return_404(client, admin_headers) -> None:
    assert client.get('/api/services/does-not-exist').status_code == 404
    assert client.put('/api/faqs/does-not-exist', json={'order': 2}, headers=admin_headers).status_code == 404

    deleted = client.delete('/api/jobs/does-not-exist', headers=admin_headers)
    assert deleted.status_code == 404
    assert deleted.json() == {'success': False, 'data': None, 'message': 'Job not found'}

    # The service keeps answering after the failed delete.
    assert client.get('/api/jobs').status_code == 200


def test_delete_removes_record(client, admin_headers) -> None:
    record = client.post(
        '/api/faqs',
        json={'question': 'Do you offer refunds?', 'answer': 'Within 14 days.'},
        headers=admin_headers,
    ).json()['data']

    response = client.delete(f"/api/faqs/{record['id']}", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()['message'] == 'FAQ deleted'
    assert client.get('/api/faqs').json()['data'] == []


def test_contact_info_is_listed_by_order(client, admin_headers) -> None:
    for order, kind in ((3, 'email'), (1, 'address'), (2, 'phone')):
        client.post(
            '/api/contact-info',
            json={'type': kind, 'title': kind.title(), 'value': f'{kind} value', 'order': order},
            headers=admin_headers,
        )

    listed = client.get('/api/contact-info').json()['data']

    assert [item['order'] for item in listed] == [1, 2, 3]
    assert [item['type'] for item in listed] == ['address', 'phone', 'email']


def test_global_offices_list_headquarters_first(client, admin_headers) -> None:
    base = {'address': '1 Main St', 'city': 'Austin', 'country': 'United States'}
    client.post('/api/global-offices', json={**base, 'name': 'Branch'}, headers=admin_headers)
    client.post(
        '/api/global-offices',
        json={**base, 'name': 'HQ', 'is_headquarters': True, 'coordinates': {'lat': 30.27, 'lng': -97.74}},
        headers=admin_headers,
    )

    listed = client.get('/api/global-offices').json()['data']

    assert [office['name'] for office in listed] == ['HQ', 'Branch']
    assert listed[0]['coordinates'] == {'lat': 30.27, 'lng': -97.74}
    assert listed[1]['coordinates'] is None


def test_contact_message_form_is_public_but_inbox_is_not(client, admin_headers) -> None:
    created = client.post(
        '/api/contact-messages',
        json={
            'name': 'Prospect',
            'email': 'prospect@assetmagnets.com',
            'subject': 'Pricing',
            'message': 'Can we get a quote?',
        },
    )

    assert created.status_code == 201
    message = created.json()['data']
    assert message['status'] == 'new'
    assert message['priority'] == 'medium'

    assert client.get('/api/contact-messages').status_code == 401
    inbox = client.get('/api/contact-messages', headers=admin_headers)
    assert [item['id'] for item in inbox.json()['data']] == [message['id']]


def test_replying_to_contact_message_marks_it_replied(client, admin_headers) -> None:
    message = client.post(
        '/api/contact-messages',
        json={'name': 'P', 'email': 'p@assetmagnets.com', 'subject': 'Hi', 'message': 'Hello'},
    ).json()['data']

    response = client.put(
        f"/api/contact-messages/{message['id']}",
        json={'reply': 'Thanks for reaching out.', 'replied_by': 'Admin User'},
        headers=admin_headers,
    )

    updated = response.json()['data']
    assert updated['status'] == 'replied'
    assert updated['replied_at'] is not None
    assert updated['replied_by'] == 'Admin User'


def test_reply_with_null_status_still_marks_message_replied(client, admin_headers) -> None:
    message = client.post(
        '/api/contact-messages',
        json={'name': 'P', 'email': 'p@assetmagnets.com', 'subject': 'Hi', 'message': 'Hello'},
    ).json()['data']

    response = client.put(
        f"/api/contact-messages/{message['id']}",
        json={'reply': 'On it.', 'status': None},
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert response.json()['data']['status'] == 'replied'


def test_course_list_can_filter_published(client, admin_headers) -> None:
    client.post('/api/courses', json={'title': 'Draft course'}, headers=admin_headers)
    client.post('/api/courses', json={'title': 'Live course', 'is_published': True}, headers=admin_headers)

    all_courses = client.get('/api/courses').json()['data']
    published = client.get('/api/courses', params={'published': 'true'}).json()['data']

    assert len(all_courses) == 2
    assert [course['title'] for course in published] == ['Live course']


def test_course_instructor_must_exist(client, admin_headers, make_user) -> None:
    instructor = make_user(email='instructor@assetmagnets.com', role='instructor')

    missing = client.post(
        '/api/courses', json={'title': 'Orphan', 'instructor_id': 'no-such-user'}, headers=admin_headers
    )
    linked = client.post(
        '/api/courses', json={'title': 'Taught', 'instructor_id': instructor.id}, headers=admin_headers
    )

    assert missing.status_code == 400
    assert missing.json()['message'] == 'Instructor not found'
    assert linked.status_code == 201
    assert linked.json()['data']['instructor_id'] == instructor.id


def test_job_list_can_filter_active(client, admin_headers) -> None:
    client.post('/api/jobs', json={'title': 'ML Engineer', 'requirements': ['Python']}, headers=admin_headers)
    client.post('/api/jobs', json={'title': 'Closed role', 'is_active': False}, headers=admin_headers)

    active = client.get('/api/jobs', params={'active': 'true'}).json()['data']

    assert [job['title'] for job in active] == ['ML Engineer']
    assert active[0]['requirements'] == ['Python']
    assert active[0]['salary_currency'] == 'USD'


def test_job_salary_range_is_validated(client, admin_headers) -> None:
    response = client.post(
        '/api/jobs', json={'title': 'Odd', 'salary_min': 100, 'salary_max': 10}, headers=admin_headers
    )

    assert response.status_code == 400


def test_users_endpoint_is_admin_only_and_hides_hashes(client, admin_headers, editor_headers) -> None:
    assert client.get('/api/users', headers=editor_headers).status_code == 403

    created = client.post(
        '/api/users',
        json={'name': 'Writer', 'email': 'Writer@AssetMagnets.com', 'password': 'secret123', 'role': 'EDITOR'},
        headers=admin_headers,
    )

    assert created.status_code == 201
    user = created.json()['data']
    assert user['email'] == 'writer@assetmagnets.com'
    assert user['role'] == 'editor'
    assert 'password_hash' not in user

    listed = client.get('/api/users', headers=admin_headers).json()['data']
    assert all('password_hash' not in item for item in listed)

    login = client.post('/api/auth/login', json={'email': 'writer@assetmagnets.com', 'password': 'secret123'})
    assert login.status_code == 200


def test_users_endpoint_rejects_duplicate_email(client, admin_headers) -> None:
    response = client.post(
        '/api/users',
        json={'name': 'Clone', 'email': 'admin@assetmagnets.com', 'password': 'secret123'},
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json()['message'] == 'User already exists'


def test_storage_failure_returns_generic_500(client, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(CrudResource, 'list', lambda self, db, *criteria: _raise_storage_failure(self, db))

    response = client.get('/api/faqs')

    assert response.status_code == 500
    assert response.json() == {'success': False, 'data': None, 'message': 'Failed to fetch FAQ'}


def _raise_storage_failure(resource, db):
    raise resource._storage_failure(db, OperationalError('SELECT 1', {}, Exception('disk I/O error')), 'fetch')


def test_storage_failure_detail_is_shown_in_development(client, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr('backend.core.config.APP_ENV', 'development')
    monkeypatch.setattr(CrudResource, 'list', lambda self, db, *criteria: _raise_storage_failure(self, db))

    response = client.get('/api/services')

    assert response.status_code == 500
    assert response.json()['message'].startswith('Failed to fetch service: ')
    assert 'disk I/O error' in response.json()['message']


def test_service_to_response_fills_defaults() -> None:
    service = service_routes.Service(
        id='svc-1',
        title='Bare',
        short_description='',
        description='',
        icon=None,
        features=None,
        category='',
        status='ACTIVE',
        created_at=datetime(2026, 1, 5, 9, 0),
        updated_at=datetime(2026, 1, 5, 9, 0),
    )

    response = service_routes.service_to_response(service)

    assert response.icon == '🛠️'
    assert response.features == []
    assert response.status == 'active'
    assert response.price.basic == 0
