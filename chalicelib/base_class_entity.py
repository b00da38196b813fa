from typing import Dict, List, Any, Optional

from chalicelib import dependencies
from chalicelib.constants.substitute_keys import from_db
from chalicelib.document_store import DocumentStore
from chalicelib.utils.data import substitute_keys, cleanup_dict
from chalicelib.utils.exceptions import MandatoryFieldsAreNotFilled, RecordNotFound, ValidationException
from chalicelib.utils.logger import logger


class EntityBase:
    """
    Record of a flat collection of the document store, addressed as <collection_path>/<id_>
    """
    collection_path = None

    required_immutable_fields_validation = {}
    required_mutable_fields_validation = {}
    optional_fields_validation = {}

    def __init__(self, id_=None):
        self.id_: Optional[str] = id_
        self.record_type: str = ''
        self.request_data: Any[Dict, None] = None

    @staticmethod
    def _store() -> DocumentStore:
        return dependencies.get_document_store()

    def _get_path(self) -> str:
        return f'{self.collection_path}/{self.id_}'

    def _get_db_item(self) -> Dict:
        item = self._store().get(self._get_path())
        if not isinstance(item, dict):
            logger.warning(f'_get_db_item ::: {self.record_type=} {self.id_=} not found')
            raise RecordNotFound(f'{self.record_type} {self.id_} not found')
        return item

    def _to_dict(self) -> Dict:
        """
        Should be re-implemented in each child class
        :return:
        dict of item's attributes
        """
        return {}

    def _validate_mandatory_fields(self):
        """
        Raise MandatoryFieldsAreNotFilled with the list of not valid fields
        """
        item = self._to_dict()
        not_valid = [
            key for key, validator_func in {
                **self.required_immutable_fields_validation,
                **self.required_mutable_fields_validation
            }.items()
            if validator_func(item.get(key)) is not True
        ]
        if not_valid:
            logger.warning(f'_validate_mandatory_fields ::: {self.record_type=} {not_valid=}')
            raise MandatoryFieldsAreNotFilled(f'Mandatory fields are not valid: {", ".join(not_valid)}')

    def _validate_optional_fields(self):
        item = self._to_dict()
        for key, validator_func in self.optional_fields_validation.items():
            if item.get(key) is not None and validator_func(item[key]) is not True:
                raise ValidationException(f'Field {key} is not valid')

    def _get_validated_update_dict(self, update_body: Dict) -> Dict:
        """
        Validates fields for update
        Delete field if it is not valid
        :return:
        Clean dict for update
        (all invalid fields will be automatically excluded)
        """
        clean_dict = {}
        validation_dict = {**self.required_mutable_fields_validation, **self.optional_fields_validation}
        for key, value in update_body.items():
            if key in validation_dict and validation_dict[key](value) is True:
                clean_dict[key] = value
            else:
                logger.warning(f'_get_validated_update_dict ::: {key=}, {value=} is not valid, '
                               f'removing from update dict..')
        return clean_dict

    def _create_db_record(self) -> str:
        """
        Validates and pushes a new record, the store generates the id
        """
        self._validate_mandatory_fields()
        self._validate_optional_fields()
        record = cleanup_dict(self._to_dict(), [None])
        self.id_ = self._store().push(self.collection_path, record)
        logger.info(f"_create_db_record ::: {self.record_type=} {self.id_=} successfully created")
        return self.id_

    def _update_db_record(self, update_body: Dict) -> Dict:
        self._get_db_item()
        update_dict = self._get_validated_update_dict(update_body)
        if not update_dict:
            raise ValidationException(f'Nothing to update in {self.record_type} {self.id_}')
        self._store().update(self._get_path(), update_dict)
        for key, value in update_dict.items():
            setattr(self, key, value)
        logger.info(f"_update_db_record ::: {self.record_type=} {self.id_=} fields={list(update_dict)} updated")
        return update_dict

    def _delete_db_record(self) -> None:
        self._get_db_item()
        self._store().remove(self._get_path())
        logger.info(f"_delete_db_record ::: {self.record_type=} {self.id_=} successfully deleted")

    def _to_ui(self) -> Dict:
        item = {'id_': self.id_, **self._to_dict()}
        substitute_keys(dict_to_process=item, base_keys=from_db)
        return item

    @classmethod
    def _get_all(cls, sort_key: str, newest_first: bool = True) -> List['EntityBase']:
        records = cls._store().get(cls.collection_path) or {}
        entities = [cls(id_=id_, **record) for id_, record in records.items() if isinstance(record, dict)]
        return sorted(entities, key=lambda entity: getattr(entity, sort_key) or 0, reverse=newest_first)
