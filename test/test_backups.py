from datetime import datetime

from chalicelib import backups, dependencies
from chalicelib.constants.default_config import DEFAULT_CONFIG
from chalicelib.document_store import InMemoryDocumentStore
from chalicelib.utils.exceptions import ReadFailed
from test.utils.request_utils import make_request, ADMIN_TOKEN, SUPER_ADMIN_TOKEN


def update_intro_title(title):
    dependencies.get_config_store().update({'intro': {**DEFAULT_CONFIG['intro'], 'mainTitle': title}})


def test_backups_require_super_admin(chalice_client):
    response = make_request(chalice_client, endpoint='/backups', token=ADMIN_TOKEN)

    assert response.status_code == 403
    assert response.json_body['exception'] == 'AccessDenied'


def test_create_and_list_backups(chalice_client, document_store):
    document_store.set('backups/old', {'timestamp': 1, 'name': 'Antiga', 'data': {'a': 1}})

    response = make_request(chalice_client, endpoint='/backups', method='POST',
                            json_body={'name': 'Abans de Nadal'}, token=SUPER_ADMIN_TOKEN)
    assert response.status_code == 201
    id_ = response.json_body['id']
    assert document_store.get(f'backups/{id_}/data') == DEFAULT_CONFIG

    listed = make_request(chalice_client, endpoint='/backups', token=SUPER_ADMIN_TOKEN).json_body
    assert [backup['name'] for backup in listed] == ['Abans de Nadal', 'Antiga']
    assert 'data' not in listed[0]


def test_default_backup_name():
    assert backups.default_backup_name(datetime(2026, 1, 2, 3, 4, 5)) == 'Còpia 02/01/2026, 03:04:05'
    assert backups.create_backup().name.startswith('Còpia ')


def test_restore_is_total_overwrite(chalice_client, document_store):
    backup_data = {**DEFAULT_CONFIG, 'intro': {**DEFAULT_CONFIG['intro'], 'mainTitle': 'Restaurada'}}
    document_store.set('backups/b1', {'timestamp': 1, 'name': 'b1', 'data': backup_data})
    update_intro_title('Canviada')
    dependencies.get_config_store().update({'promo': {'text': 'only in the current version'}})

    response = make_request(chalice_client, endpoint='/backups/b1/restore', method='POST', token=SUPER_ADMIN_TOKEN)

    assert response.status_code == 200
    assert document_store.get('websiteConfig') == backup_data
    assert dependencies.get_config_store().get() == backup_data


def test_restore_unknown_backup(chalice_client):
    response = make_request(chalice_client, endpoint='/backups/unknown/restore', method='POST',
                            token=SUPER_ADMIN_TOKEN)

    assert response.status_code == 404


def test_delete_backup(chalice_client, document_store):
    document_store.set('backups/b1', {'timestamp': 1, 'name': 'b1', 'data': {'a': 1}})

    response = make_request(chalice_client, endpoint='/backups/b1', method='DELETE', token=SUPER_ADMIN_TOKEN)

    assert response.status_code == 200
    assert document_store.get('backups') is None


def test_factory_reset_uses_master_version(chalice_client, document_store):
    update_intro_title('Mestra')
    response = make_request(chalice_client, endpoint='/backups/master', method='POST', token=SUPER_ADMIN_TOKEN)
    assert response.status_code == 200
    assert response.json_body['id'] == 'master_delivery'

    update_intro_title('Canviada')
    response = make_request(chalice_client, endpoint='/factory-reset', method='POST', token=SUPER_ADMIN_TOKEN)

    assert response.status_code == 200
    assert document_store.get('websiteConfig/intro/mainTitle') == 'Mestra'


def test_factory_reset_without_master_uses_default(document_store):
    update_intro_title('Canviada')

    assert backups.factory_reset() == DEFAULT_CONFIG
    assert document_store.get('websiteConfig') == DEFAULT_CONFIG


class UnreadableBackupsStore(InMemoryDocumentStore):
    def get(self, path):
        if path.startswith('backups'):
            raise ReadFailed('backups are not readable')
        return super().get(path)


def test_factory_reset_read_error_falls_back_to_default():
    store = UnreadableBackupsStore()
    dependencies.set_document_store(store)
    update_intro_title('Canviada')

    assert backups.factory_reset() == DEFAULT_CONFIG
    assert store.get('websiteConfig') == DEFAULT_CONFIG
