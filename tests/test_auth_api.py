"""Admin login, logout and password reset."""


def login(client, password='password', username='admin'):
    return client.post('/api/login', json={'username': username, 'password': password})


def test_login_and_logout(client):
    assert client.get('/api/appointments').status_code == 401

    response = login(client)
    assert response.status_code == 200
    assert response.get_json() == {'ok': True}
    assert client.get('/api/appointments').status_code == 200

    assert client.post('/api/logout').get_json() == {'ok': True}
    assert client.get('/api/appointments').status_code == 401


def test_wrong_credentials(client):
    response = login(client, password='letmein')
    assert response.status_code == 401
    assert response.get_json() == {'ok': False, 'error': 'Invalid username or password'}
    assert login(client, username='root').status_code == 401
    assert client.post('/api/login', json={}).status_code == 401


def test_forgot_password_for_unknown_user(client):
    response = client.post('/api/forgot-password', json={'username': 'root'})
    assert response.status_code == 400
    assert response.get_json() == {'error': 'Username not found'}


def test_reset_password(client):
    response = client.post('/api/forgot-password', json={'username': 'admin'})
    assert response.status_code == 200
    code = response.get_json()['resetCode']

    response = client.post('/api/reset-password', json={'resetCode': code, 'newPassword': 'new-secret'})
    assert response.status_code == 200
    assert response.get_json()['ok'] is True

    assert login(client, password='password').status_code == 401
    assert login(client, password='new-secret').status_code == 200

    # Codes are single use
    response = client.post('/api/reset-password', json={'resetCode': code, 'newPassword': 'another-one'})
    assert response.status_code == 400
    assert response.get_json() == {'error': 'Invalid or expired reset code'}


def test_reset_password_validation(client):
    code = client.post('/api/forgot-password', json={'username': 'admin'}).get_json()['resetCode']

    response = client.post('/api/reset-password', json={'resetCode': code})
    assert response.get_json() == {'error': 'Reset code and new password are required'}

    response = client.post('/api/reset-password', json={'resetCode': code, 'newPassword': 'abc'})
    assert response.status_code == 400
    assert response.get_json() == {'error': 'Password must be at least 6 characters'}

    response = client.post('/api/reset-password', json={'resetCode': '000000', 'newPassword': 'abcdef'})
    assert response.status_code == 400


def test_reset_code_hidden_unless_exposed(app, client):
    app.config['EXPOSE_RESET_CODE'] = False
    body = client.post('/api/forgot-password', json={'username': 'admin'}).get_json()
    assert body['ok'] is True
    assert 'resetCode' not in body
    assert len(app.extensions['reset_codes']) == 1
