from boto3.dynamodb.types import TypeDeserializer
from chalice.app import DynamoDBEvent

from chalicelib import dependencies
from chalicelib.document_store import DynamoDocumentStore
from chalicelib.utils.logger import logger, log_exception


deserializer = TypeDeserializer()


def deserialize_ddb_rec(record=None):
    if record is None:
        record = {}
    return {key: deserializer.deserialize(value) for key, value in record.items()}


def changed_path(record) -> str:
    keys = deserialize_ddb_rec(record.keys)
    return DynamoDocumentStore.path_from_keys(keys['partkey'], keys['sortkey'])


def db_gen_table_stream_trigger(ddb_event: DynamoDBEvent):
    """
    Changes written by other lambdas reach the watchers of this process (config store included)
    """
    logger.debug(f'db_gen_table_stream_trigger ::: function triggered ddb_event={ddb_event.to_dict()}')
    document_store = dependencies.get_document_store()
    # registers the configuration watch on a cold start
    dependencies.get_config_store()
    for record in ddb_event:
        try:
            path = changed_path(record)
            logger.info(f'db_gen_table_stream_trigger ::: {record.event_name=} {path=}')
            document_store.dispatch(path)
        except Exception as e:
            log_exception(e)
