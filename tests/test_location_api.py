"""Business location endpoints."""


def test_default_location(client):
    response = client.get('/api/location')
    assert response.status_code == 200
    location = response.get_json()
    assert location['address'] == '123 Main Street, City, State 12345'
    assert location['latitude'] == 28.6139
    assert location['longitude'] == 77.2090
    assert location['zoom'] == 15


def test_update_requires_admin(client):
    assert client.put('/api/location', json={'address': 'x', 'latitude': 1, 'longitude': 1}).status_code == 401


def test_update_location(client, admin_client):
    response = admin_client.put('/api/location', json={
        'address': '14 Ring Road, Lajpat Nagar, New Delhi',
        'phone': '+91-11-2345-6789',
        'latitude': '28.5677',
        'longitude': 77.2433,
    })
    assert response.status_code == 200
    saved = response.get_json()['location']
    assert saved['latitude'] == 28.5677
    assert saved['zoom'] == 15
    assert saved['hours'] == ''
    assert client.get('/api/location').get_json() == saved


def test_equator_and_meridian_are_valid(admin_client):
    response = admin_client.put('/api/location', json={
        'address': 'Null Island', 'latitude': 0, 'longitude': 0, 'zoom': 3
    })
    assert response.status_code == 200
    assert response.get_json()['location']['zoom'] == 3


def test_missing_fields(admin_client):
    assert admin_client.put('/api/location', json={'latitude': 10, 'longitude': 10}).status_code == 400
    assert admin_client.put('/api/location', json={'address': 'Somewhere', 'longitude': 10}).status_code == 400


def test_out_of_range_coordinates(admin_client):
    response = admin_client.put('/api/location', json={'address': 'Pole', 'latitude': 91, 'longitude': 0})
    assert response.status_code == 400
    assert 'Invalid latitude' in response.get_json()['error']

    response = admin_client.put('/api/location', json={'address': 'Edge', 'latitude': 0, 'longitude': -181})
    assert response.status_code == 400
    assert 'Invalid longitude' in response.get_json()['error']

    response = admin_client.put('/api/location', json={'address': 'Nowhere', 'latitude': 'north', 'longitude': 0})
    assert response.status_code == 400
