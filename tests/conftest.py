"""Shared test fixtures and helpers."""
import pytest

from drivingschool import create_app, db


@pytest.fixture(params=['json', 'sql'])
def app(request, tmp_path):
    """The application on each storage backend, with fresh data per test"""
    app = create_app({
        'TESTING': True,
        'SECRET_KEY': 'test-secret',
        'STORAGE_BACKEND': request.param,
        'DATA_DIR': str(tmp_path / 'data'),
        'SQLALCHEMY_DATABASE_URI': f"sqlite:///{tmp_path / 'booking.db'}",
        'ADMIN_USERNAME': 'admin',
        'ADMIN_PASSWORD': 'password',
        'EXPOSE_RESET_CODE': True,
    })
    yield app
    if request.param == 'sql':
        with app.app_context():
            db.session.remove()
            db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(app):
    client = app.test_client()
    response = client.post('/api/login', json={'username': 'admin', 'password': 'password'})
    assert response.status_code == 200
    return client


def lesson(**overrides):
    """Body of a lesson request"""
    body = {
        'name': 'Asha Verma',
        'email': 'asha.verma@gmail.com',
        'phone': '+91-90000-00001',
        'date': '2024-06-01',
        'time': '10:00',
        'note': 'First lesson',
        'vehicleId': 'v1',
        'trainerId': 't1',
    }
    body.update(overrides)
    return body


def book(client, **overrides):
    response = client.post('/api/appointments', json=lesson(**overrides))
    assert response.status_code == 200, response.get_json()
    return response.get_json()['appointment']


def set_status(client, appointment_id, status):
    return client.put(f'/api/appointments/{appointment_id}', json={'status': status})
