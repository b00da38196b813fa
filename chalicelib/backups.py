"""
Snapshots of the website configuration: create, list, restore, delete,
the master version and the factory reset.
"""
from copy import deepcopy
from datetime import datetime
from typing import Optional

from chalice import Response

from chalicelib import dependencies
from chalicelib.base_class_entity import EntityBase
from chalicelib.constants import keys_structure
from chalicelib.constants.constants import MASTER_BACKUP_ID, BACKUP_NAME_PREFIX
from chalicelib.constants.default_config import DEFAULT_CONFIG
from chalicelib.constants.status_codes import http200, http201
from chalicelib.utils import app as utils_app, auth as utils_auth, data as utils_data
from chalicelib.utils.exceptions import StoreError, ValidationException
from chalicelib.utils.logger import logger, log_exception

MASTER_BACKUP_NAME = 'Versió mestra'


def default_backup_name(now: Optional[datetime] = None) -> str:
    return f"{BACKUP_NAME_PREFIX} {(now or datetime.now()).strftime('%d/%m/%Y, %H:%M:%S')}"


class Backup(EntityBase):
    collection_path = keys_structure.backups_path

    required_immutable_fields_validation = {
        'timestamp': lambda x: isinstance(x, int),
        'name': lambda x: isinstance(x, str) and bool(x),
        'data': lambda x: isinstance(x, dict)
    }

    def __init__(self, id_=None, **kwargs):
        EntityBase.__init__(self, id_)
        self.timestamp: int = kwargs.get('timestamp')
        self.name: str = kwargs.get('name')
        self.data: dict = kwargs.get('data')
        self.record_type = 'backup'

    @classmethod
    def init_by_id(cls, backup_id):
        c = cls(id_=backup_id)
        c.__init__(id_=backup_id, **c._get_db_item())
        return c

    @classmethod
    def from_current_config(cls, name: Optional[str] = None, id_: Optional[str] = None):
        return cls(
            id_=id_,
            timestamp=utils_data.now_ms(),
            name=(name or '').strip() or default_backup_name(),
            data=dependencies.get_config_store().get()
        )

    def _to_dict(self):
        return {
            'timestamp': self.timestamp,
            'name': self.name,
            'data': self.data
        }

    def _to_ui_summary(self):
        item = self._to_ui()
        item.pop('data', None)
        return item


def list_backups():
    """ Newest first """
    return Backup._get_all(sort_key='timestamp')


def create_backup(name: Optional[str] = None) -> Backup:
    backup = Backup.from_current_config(name)
    backup._create_db_record()
    logger.info(f'create_backup ::: {backup.id_=} {backup.name=} created')
    return backup


def restore_backup(backup_id: str) -> dict:
    backup = Backup.init_by_id(backup_id)
    if not isinstance(backup.data, dict):
        raise ValidationException(f'Backup {backup_id} has no configuration data')
    document = dependencies.get_config_store().replace(backup.data)
    logger.info(f'restore_backup ::: {backup_id=} restored')
    return document


def delete_backup(backup_id: str) -> None:
    Backup(id_=backup_id)._delete_db_record()


def set_master_version() -> Backup:
    backup = Backup.from_current_config(MASTER_BACKUP_NAME, id_=MASTER_BACKUP_ID)
    backup._validate_mandatory_fields()
    dependencies.get_document_store().set(backup._get_path(), utils_data.to_json_safe(backup._to_dict()))
    logger.info('set_master_version ::: master version saved')
    return backup


def factory_reset() -> dict:
    """
    Restores the master version when it exists, the hard-coded default otherwise
    """
    data = None
    try:
        master = dependencies.get_document_store().get(keys_structure.backup_path.format(backup_id=MASTER_BACKUP_ID))
        if isinstance(master, dict) and isinstance(master.get('data'), dict):
            data = master['data']
    except StoreError as error:
        log_exception(error, msg='factory_reset ::: master version is not readable, using default configuration')
    source = 'master' if data is not None else 'default'
    document = dependencies.get_config_store().replace(data if data is not None else deepcopy(DEFAULT_CONFIG))
    logger.info(f'factory_reset ::: configuration restored from {source=}')
    return document


@utils_app.request_exception_handler
@utils_auth.authenticate_super_admin
@utils_app.log_start_finish
def endpoint_get_all(request) -> Response:
    backups = [backup._to_ui_summary() for backup in list_backups()]
    return Response(status_code=http200, body=backups)


@utils_app.request_exception_handler
@utils_auth.authenticate_super_admin
@utils_app.log_start_finish
def endpoint_create(request) -> Response:
    backup = create_backup(utils_data.parse_raw_body(request).get('name'))
    return Response(status_code=http201, body=backup._to_ui_summary())


@utils_app.request_exception_handler
@utils_auth.authenticate_super_admin
@utils_app.log_start_finish
def endpoint_restore(request, backup_id) -> Response:
    return Response(status_code=http200, body=restore_backup(backup_id))


@utils_app.request_exception_handler
@utils_auth.authenticate_super_admin
@utils_app.log_start_finish
def endpoint_delete(request, backup_id) -> Response:
    delete_backup(backup_id)
    return Response(status_code=http200, body={'message': 'Backup was successfully deleted', 'id': backup_id})


@utils_app.request_exception_handler
@utils_auth.authenticate_super_admin
@utils_app.log_start_finish
def endpoint_set_master(request) -> Response:
    return Response(status_code=http200, body=set_master_version()._to_ui_summary())


@utils_app.request_exception_handler
@utils_auth.authenticate_super_admin
@utils_app.log_start_finish
def endpoint_factory_reset(request) -> Response:
    return Response(status_code=http200, body=factory_reset())
