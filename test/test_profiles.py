from test.utils.request_utils import make_request, ADMIN_TOKEN, ADMIN_ID, SUPER_ADMIN_TOKEN


def test_get_empty_profile(chalice_client):
    response = make_request(chalice_client, endpoint='/profile', token=ADMIN_TOKEN)

    assert response.status_code == 200
    assert response.json_body == {'id': ADMIN_ID, 'email': 'admin@example.com', 'displayName': '',
                                  'isSuperAdmin': False}


def test_update_display_name_is_trimmed(chalice_client, document_store):
    response = make_request(chalice_client, endpoint='/profile', method='PUT',
                            json_body={'displayName': '  Anna  '}, token=ADMIN_TOKEN)

    assert response.status_code == 200
    assert document_store.get(f'adminProfiles/{ADMIN_ID}/displayName') == 'Anna'
    assert make_request(chalice_client, endpoint='/profile', token=ADMIN_TOKEN).json_body['displayName'] == 'Anna'


def test_super_admin_flag(chalice_client):
    response = make_request(chalice_client, endpoint='/profile', token=SUPER_ADMIN_TOKEN)

    assert response.json_body['isSuperAdmin'] is True


def test_counters_are_empty(chalice_client):
    response = make_request(chalice_client, endpoint='/admin/counters', token=ADMIN_TOKEN)

    assert response.json_body == {'inbox': 0, 'reservations': 0}
