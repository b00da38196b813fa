import pytest
from botocore.exceptions import ClientError

from chalicelib import auth
from test.utils.request_utils import make_request


class FakeCognito:
    def __init__(self, error=None):
        self.error = error
        self.id_token = 'id-token'
        self.access_token = 'access-token'
        self.refresh_token = 'refresh-token'

    def authenticate(self, password):
        if self.error:
            raise self.error

    def initiate_forgot_password(self):
        if self.error:
            raise self.error


def cognito_error(code):
    return ClientError({'Error': {'Code': code, 'Message': code}}, 'InitiateAuth')


def test_login(chalice_client, monkeypatch):
    monkeypatch.setattr(auth, 'get_cognito', lambda username: FakeCognito())

    response = make_request(chalice_client, endpoint='/auth/login', method='POST',
                            json_body={'email': 'admin@example.com', 'password': 'secret'})

    assert response.status_code == 200
    assert response.json_body['id_token'] == 'id-token'


@pytest.mark.parametrize('code, message', [
    ('NotAuthorizedException', 'Correu o contrasenya incorrectes.'),
    ('UserNotFoundException', 'Correu o contrasenya incorrectes.'),
    ('TooManyRequestsException', 'Massa intents fallits. Prova-ho més tard.'),
    ('LimitExceededException', 'Massa intents fallits. Prova-ho més tard.'),
    ('InternalErrorException', 'Error al iniciar sessió. Comprova la connexió.'),
])
def test_login_errors(chalice_client, monkeypatch, code, message):
    monkeypatch.setattr(auth, 'get_cognito', lambda username: FakeCognito(cognito_error(code)))

    response = make_request(chalice_client, endpoint='/auth/login', method='POST',
                            json_body={'email': 'admin@example.com', 'password': 'wrong'})

    assert response.status_code == 401
    assert response.json_body['message'] == message


def test_login_without_password(chalice_client):
    response = make_request(chalice_client, endpoint='/auth/login', method='POST',
                            json_body={'email': 'admin@example.com'})

    assert response.status_code == 400


def test_reset_password(chalice_client, monkeypatch):
    monkeypatch.setattr(auth, 'get_cognito', lambda username: FakeCognito())

    response = make_request(chalice_client, endpoint='/auth/reset-password', method='POST',
                            json_body={'email': 'admin@example.com'})

    assert response.status_code == 200


def test_reset_password_without_email(chalice_client):
    response = make_request(chalice_client, endpoint='/auth/reset-password', method='POST', json_body={'email': ' '})

    assert response.status_code == 400
    assert response.json_body['message'] == 'Escriu el teu correu electrònic per restablir la contrasenya.'


def test_reset_password_failure(chalice_client, monkeypatch):
    monkeypatch.setattr(auth, 'get_cognito', lambda username: FakeCognito(cognito_error('UserNotFoundException')))

    response = make_request(chalice_client, endpoint='/auth/reset-password', method='POST',
                            json_body={'email': 'nobody@example.com'})

    assert response.status_code == 400
    assert response.json_body['message'] == "No s'ha pogut enviar el correu. Comprova que l'adreça sigui correcta."
