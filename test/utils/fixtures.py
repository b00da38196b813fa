import pytest
from chalice.test import Client

from chalicelib import dependencies
from chalicelib.document_store import InMemoryDocumentStore
from chalicelib.utils import auth as utils_auth
from chalicelib.utils.exceptions import AuthorizationException
from test.utils.request_utils import TOKEN_CLAIMS, SUPER_ADMIN_EMAIL


@pytest.fixture(autouse=True)
def document_store() -> InMemoryDocumentStore:
    store = InMemoryDocumentStore()
    dependencies.set_document_store(store)
    yield store
    dependencies.set_document_store(None)


@pytest.fixture(autouse=True)
def cognito_tokens(monkeypatch):
    def decode_token(token):
        if token not in TOKEN_CLAIMS:
            raise AuthorizationException('Signature verification failed')
        return dict(TOKEN_CLAIMS[token])

    monkeypatch.setattr(utils_auth, 'decode_token', decode_token)
    monkeypatch.setattr(utils_auth, 'get_super_admin_emails', lambda: [SUPER_ADMIN_EMAIL])


@pytest.fixture
def chalice_client() -> Client:
    from app import app
    with Client(app) as client:
        yield client
