from chalicelib.constants.default_config import DEFAULT_CONFIG
from chalicelib.website_config import sanitize_patch
from test.utils.request_utils import make_request, ADMIN_TOKEN


def test_get_config_bootstraps_default(chalice_client, document_store):
    response = make_request(chalice_client, endpoint='/config')

    assert response.status_code == 200
    assert response.json_body == DEFAULT_CONFIG
    assert document_store.get('websiteConfig') == DEFAULT_CONFIG


def test_get_config_merges_legacy_document(chalice_client, document_store):
    document_store.set('websiteConfig', {
        'hero': {'reservationVisible': False},
        'foodMenu': [{'id': 's1', 'category': 'ENTRANTS', 'items': []}],
        'extraMenus': {'1': {'title': 'Nadal'}, '0': {'title': 'Calçotada'}}
    })

    config = make_request(chalice_client, endpoint='/config').json_body

    assert config['hero']['formType'] == 'none'
    assert config['foodMenu']['sections'][0]['category'] == 'ENTRANTS'
    assert [menu['title'] for menu in config['extraMenus']] == ['Calçotada', 'Nadal']


def test_update_config_requires_admin(chalice_client):
    response = make_request(chalice_client, endpoint='/config', method='PUT', json_body={'intro': {'visible': False}})

    assert response.status_code == 401


def test_update_config(chalice_client, document_store):
    intro = {**DEFAULT_CONFIG['intro'], 'visible': False}
    response = make_request(chalice_client, endpoint='/config', method='PUT',
                            json_body={'intro': intro}, token=ADMIN_TOKEN)

    assert response.status_code == 200
    assert document_store.get('websiteConfig/intro/visible') is False
    assert document_store.get('websiteConfig/hero') == DEFAULT_CONFIG['hero']
    assert make_request(chalice_client, endpoint='/config').json_body['intro']['visible'] is False


def test_update_config_rejects_empty_patch(chalice_client):
    response = make_request(chalice_client, endpoint='/config', method='PUT', json_body={}, token=ADMIN_TOKEN)

    assert response.status_code == 400


def test_sanitize_patch_filters_and_caps_images():
    config = {'adminSettings': {'maxHeroImages': 2, 'maxExtraMenus': 1}}
    patch = {
        'hero': {'backgroundImages': ['https://img/1.png', 'javascript:alert(1)', '', 'data:image/png;base64,AAA',
                                      'https://img/3.png']},
        'extraMenus': {'1': {'title': 'b'}, '0': {'title': 'a'}}
    }

    sanitized = sanitize_patch(patch, config)

    assert sanitized['hero']['backgroundImages'] == ['https://img/1.png', 'data:image/png;base64,AAA']
    assert sanitized['extraMenus'] == [{'title': 'a'}]
    assert patch['hero']['backgroundImages'][1] == 'javascript:alert(1)'


def test_sanitize_patch_uses_caps_from_patch():
    patch = {
        'adminSettings': {'maxProductImages': 1},
        'philosophy': {'productImages': ['https://img/1.png', 'https://img/2.png']},
        'brand': {'logoUrl': 'not an url'}
    }

    sanitized = sanitize_patch(patch, DEFAULT_CONFIG)

    assert sanitized['philosophy']['productImages'] == ['https://img/1.png']
    assert 'logoUrl' not in sanitized['brand']


def test_update_config_rejects_unknown_form_type(chalice_client, document_store):
    response = make_request(chalice_client, endpoint='/config', method='PUT',
                            json_body={'hero': {**DEFAULT_CONFIG['hero'], 'formType': 'popup'}}, token=ADMIN_TOKEN)

    assert response.status_code == 400
    assert document_store.get('websiteConfig/hero/formType') == 'reservation'
