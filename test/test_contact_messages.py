import pytest

from chalicelib import messages
from chalicelib.messages import ContactMessage
from test.utils.request_utils import make_request, ADMIN_TOKEN

message_to_create = {
    'name': 'Marta',
    'email': 'marta@example.com',
    'phone': '600000000',
    'subject': 'Calçotada',
    'message': 'Voldria informació per a un grup de 20 persones.',
    'privacy': True
}


def create_test_message(chalice_client, **overrides):
    response = make_request(chalice_client, endpoint='/contact-messages', method='POST',
                            json_body={**message_to_create, **overrides})
    assert response.status_code == 201
    return response.json_body['id']


def test_create_message(chalice_client, document_store):
    id_ = create_test_message(chalice_client)

    record = document_store.get(f'contactMessages/{id_}')
    assert record['name'] == 'Marta'
    assert record['privacyAccepted'] is True
    assert record['read'] is False
    assert isinstance(record['timestamp'], int)


def test_create_message_without_privacy(chalice_client, document_store):
    response = make_request(chalice_client, endpoint='/contact-messages', method='POST',
                            json_body={**message_to_create, 'privacy': False})

    assert response.status_code == 400
    assert response.json_body['message'] == 'Si us plau, accepta la política de privacitat.'
    assert document_store.get('contactMessages') is None


def test_create_message_with_list_body(chalice_client, document_store):
    response = make_request(chalice_client, endpoint='/contact-messages', method='POST', json_body=[])

    assert response.status_code == 400
    assert response.json_body['exception'] == 'ValidationException'
    assert document_store.get('contactMessages') is None


@pytest.mark.parametrize('missing_field', ['name', 'email', 'message'])
def test_create_message_without_mandatory_field(chalice_client, missing_field):
    response = make_request(chalice_client, endpoint='/contact-messages', method='POST',
                            json_body={**message_to_create, missing_field: ''})

    assert response.status_code == 400
    assert response.json_body['exception'] == 'MandatoryFieldsAreNotFilled'


def test_list_messages_newest_first(chalice_client, document_store):
    document_store.set('contactMessages/old', {**message_to_create, 'timestamp': 1, 'read': True})
    document_store.set('contactMessages/new', {**message_to_create, 'timestamp': 2, 'read': False})

    response = make_request(chalice_client, endpoint='/contact-messages', token=ADMIN_TOKEN)

    assert response.status_code == 200
    assert [message['id'] for message in response.json_body] == ['new', 'old']


def test_mark_as_read_and_counters(chalice_client):
    id_ = create_test_message(chalice_client)
    assert make_request(chalice_client, endpoint='/admin/counters', token=ADMIN_TOKEN).json_body['inbox'] == 1

    response = make_request(chalice_client, endpoint=f'/contact-messages/{id_}/read', method='PUT', token=ADMIN_TOKEN)

    assert response.status_code == 200
    assert response.json_body['read'] is True
    assert make_request(chalice_client, endpoint='/admin/counters', token=ADMIN_TOKEN).json_body['inbox'] == 0


def test_delete_message(chalice_client, document_store):
    id_ = create_test_message(chalice_client)

    response = make_request(chalice_client, endpoint=f'/contact-messages/{id_}', method='DELETE', token=ADMIN_TOKEN)

    assert response.status_code == 200
    assert document_store.get(f'contactMessages/{id_}') is None


def test_delete_unknown_message(chalice_client):
    response = make_request(chalice_client, endpoint='/contact-messages/unknown', method='DELETE', token=ADMIN_TOKEN)

    assert response.status_code == 404


def test_notification_is_sent_when_enabled(monkeypatch, document_store):
    sent = []
    monkeypatch.setenv('NOTIFICATIONS_EMAIL_FROM', 'web@example.com')
    monkeypatch.setattr(messages, 'send_email_ses', lambda **kwargs: sent.append(kwargs))
    document_store.set('websiteConfig/emailSettings', {
        'enabled': True, 'recipients': ['owner@example.com'], 'autoReply': True,
        'autoReplySubject': 'Gràcies', 'autoReplyMessage': 'Et respondrem aviat.'
    })

    ContactMessage(id_='m1', **{**message_to_create, 'privacyAccepted': True}).notify()

    assert [email['emails_to'] for email in sent] == [['owner@example.com'], ['marta@example.com']]
    assert sent[0]['subject'] == 'Nou Contacte Web - Calçotada'
    assert sent[0]['reply_to'] == ['marta@example.com']


def test_notification_failure_is_not_raised(monkeypatch, document_store):
    def send_email_ses(**kwargs):
        raise RuntimeError('ses is down')

    monkeypatch.setenv('NOTIFICATIONS_EMAIL_FROM', 'web@example.com')
    monkeypatch.setattr(messages, 'send_email_ses', send_email_ses)
    document_store.set('websiteConfig/emailSettings', {'enabled': True, 'recipients': ['owner@example.com']})

    ContactMessage(id_='m1', **message_to_create).notify()


def test_notification_disabled_by_default(monkeypatch):
    sent = []
    monkeypatch.setattr(messages, 'send_email_ses', lambda **kwargs: sent.append(kwargs))

    ContactMessage(id_='m1', **message_to_create).notify()

    assert sent == []
