"""
Path addressed JSON document store with change watchers.

Paths look like ``websiteConfig``, ``reservations/<id>`` or ``adminProfiles/<uid>/displayName``.
Every write notifies the watchers registered on the written path, on its ancestors and on its
descendants. A watcher receives the current value of the path it watches (None when absent).
"""
import functools
from copy import deepcopy
from typing import Any, Callable, Dict, List, Optional, Tuple
from uuid import uuid4

from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from chalicelib.constants import keys_structure
from chalicelib.utils import db as utils_db
from chalicelib.utils.data import from_db_value, now_ms, to_db_value
from chalicelib.utils.exceptions import ReadFailed, RecordNotFound, WriteRejected
from chalicelib.utils.logger import logger

Watcher = Callable[[Any], None]


def split_path(path: str) -> List[str]:
    segments = [segment for segment in str(path).split('/') if segment]
    if not segments:
        raise ValueError(f'Empty store path {path=}')
    return segments


def is_related_path(watched: List[str], written: List[str]) -> bool:
    shortest = min(len(watched), len(written))
    return watched[:shortest] == written[:shortest]


def generate_id() -> str:
    # ids sort in creation order like the realtime database push ids
    return f'{now_ms():013d}{uuid4().hex[:8]}'


def _store_errors(error_class):
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except ClientError as error:
                code = error.response.get('Error', {}).get('Code')
                logger.error(f'{func.__name__} ::: store call failed {code=}, {error=}')
                raise error_class(f'{func.__name__} failed: {code}') from error
        return wrapper
    return decorator


class DocumentStore:
    """
    Base class, implementations provide get/set/update/push/remove.
    Watchers are kept in process and fired synchronously after every local write
    """
    # True when every change of the data is observed by this process
    pushes_changes = True

    def __init__(self):
        self._watchers: Dict[Tuple[str, ...], List[Watcher]] = {}

    def get(self, path: str) -> Any:
        raise NotImplementedError

    def set(self, path: str, value: Any) -> None:
        raise NotImplementedError

    def update(self, path: str, patch: dict) -> None:
        raise NotImplementedError

    def push(self, path: str, value: Any) -> str:
        id_ = generate_id()
        self.set(f'{path}/{id_}', value)
        return id_

    def remove(self, path: str) -> None:
        raise NotImplementedError

    def watch(self, path: str, callback: Watcher) -> Callable[[], None]:
        """
        Registers callback and emits the current value right away.
        Returns a disposer, calling it stops further emissions
        """
        key = tuple(split_path(path))
        self._watchers.setdefault(key, []).append(callback)
        logger.debug(f'watch ::: {path=} watchers={len(self._watchers[key])}')

        def dispose():
            callbacks = self._watchers.get(key, [])
            if callback in callbacks:
                callbacks.remove(callback)
            if not callbacks:
                self._watchers.pop(key, None)
            logger.debug(f'watch ::: {path=} disposed')

        callback(self.get(path))
        return dispose

    def dispatch(self, path: str) -> None:
        """
        Emits the current value to every watcher related to the changed path
        """
        written = split_path(path)
        for key, callbacks in list(self._watchers.items()):
            if not is_related_path(list(key), written):
                continue
            value = self.get('/'.join(key))
            for callback in list(callbacks):
                callback(deepcopy(value))


class InMemoryDocumentStore(DocumentStore):
    """Simple in-memory store for local development and tests."""

    def __init__(self, initial_data: Optional[dict] = None):
        super().__init__()
        self._root: dict = deepcopy(initial_data) if initial_data else {}

    def reset(self):
        self._root = {}

    def _node(self, segments: List[str]) -> Any:
        node = self._root
        for segment in segments:
            if not isinstance(node, dict) or segment not in node:
                return None
            node = node[segment]
        return node

    def get(self, path: str) -> Any:
        return deepcopy(self._node(split_path(path)))

    def set(self, path: str, value: Any) -> None:
        if value is None:
            self.remove(path)
            return
        segments = split_path(path)
        node = self._root
        for segment in segments[:-1]:
            if not isinstance(node.get(segment), dict):
                node[segment] = {}
            node = node[segment]
        node[segments[-1]] = deepcopy(value)
        self.dispatch(path)

    def update(self, path: str, patch: dict) -> None:
        current = self.get(path)
        merged = current if isinstance(current, dict) else {}
        for key, value in patch.items():
            if value is None:
                merged.pop(key, None)
            else:
                merged[key] = deepcopy(value)
        self.set(path, merged or None)

    def remove(self, path: str) -> None:
        segments = split_path(path)
        parents = [self._root]
        for segment in segments[:-1]:
            node = parents[-1].get(segment)
            if not isinstance(node, dict):
                return
            parents.append(node)
        if segments[-1] not in parents[-1]:
            return
        del parents[-1][segments[-1]]
        # empty parents disappear the same way the realtime database prunes them
        for depth in range(len(parents) - 1, 0, -1):
            if parents[depth]:
                break
            del parents[depth - 1][segments[depth - 1]]
        self.dispatch(path)


class DynamoDocumentStore(DocumentStore):
    """
    Single table layout: partkey is the root segment, sortkey the record id
    (keys_structure.singleton_sk for single-document paths), the value is kept in the body attribute.
    Changes made by other processes arrive through the table stream, see triggers.py
    """
    pushes_changes = False

    def __init__(self, table=utils_db.get_gen_table):
        super().__init__()
        self.table = table

    @staticmethod
    def _split_key(path: str) -> Tuple[str, Optional[str], List[str]]:
        segments = split_path(path)
        partkey = segments[0]
        if partkey in keys_structure.singleton_paths:
            return partkey, keys_structure.singleton_sk, segments[1:]
        if len(segments) == 1:
            return partkey, None, []
        return partkey, segments[1], segments[2:]

    @staticmethod
    def _drill(value: Any, inner: List[str]) -> Any:
        for segment in inner:
            if not isinstance(value, dict):
                return None
            value = value.get(segment)
        return value

    def _get_body(self, partkey: str, sortkey: str) -> Any:
        try:
            item = utils_db.get_db_item(partkey, sortkey, table=self.table)
        except RecordNotFound:
            return None
        return from_db_value(item.get(utils_db.BODY_ATTRIBUTE))

    def _put_body(self, partkey: str, sortkey: str, body: Any) -> None:
        utils_db.put_db_record({
            'partkey': partkey,
            'sortkey': sortkey,
            utils_db.BODY_ATTRIBUTE: to_db_value(body)
        }, table=self.table)

    def _query_partition(self, partkey: str) -> List[dict]:
        return utils_db.query_items_paged(Key('partkey').eq(partkey), table=self.table)

    @_store_errors(ReadFailed)
    def get(self, path: str) -> Any:
        partkey, sortkey, inner = self._split_key(path)
        if sortkey is None:
            items = self._query_partition(partkey)
            collection = {item['sortkey']: from_db_value(item.get(utils_db.BODY_ATTRIBUTE)) for item in items}
            return collection or None
        return self._drill(self._get_body(partkey, sortkey), inner)

    @_store_errors(WriteRejected)
    def set(self, path: str, value: Any) -> None:
        if value is None:
            self.remove(path)
            return
        partkey, sortkey, inner = self._split_key(path)
        if sortkey is None:
            if not isinstance(value, dict):
                raise WriteRejected(f'Collection {path=} accepts only objects')
            for item in self._query_partition(partkey):
                if item['sortkey'] not in value:
                    utils_db.delete_db_record(partkey, item['sortkey'], table=self.table)
            for child_id, child_value in value.items():
                self._put_body(partkey, child_id, child_value)
        elif not inner:
            self._put_body(partkey, sortkey, value)
        else:
            body = self._get_body(partkey, sortkey)
            body = body if isinstance(body, dict) else {}
            node = body
            for segment in inner[:-1]:
                if not isinstance(node.get(segment), dict):
                    node[segment] = {}
                node = node[segment]
            node[inner[-1]] = value
            self._put_body(partkey, sortkey, body)
        self.dispatch(path)

    @_store_errors(WriteRejected)
    def update(self, path: str, patch: dict) -> None:
        partkey, sortkey, inner = self._split_key(path)
        if sortkey is not None and not inner and all(value is not None for value in patch.values()):
            try:
                utils_db.update_db_record(
                    key={'partkey': partkey, 'sortkey': sortkey},
                    update_body=to_db_value(patch),
                    table=self.table
                )
                self.dispatch(path)
                return
            except ClientError as error:
                if error.response.get('Error', {}).get('Code') != 'ConditionalCheckFailedException':
                    raise
                logger.info(f'update ::: {path=} does not exist yet, creating')
        current = self.get(path)
        merged = current if isinstance(current, dict) else {}
        for key, value in patch.items():
            if value is None:
                merged.pop(key, None)
            else:
                merged[key] = value
        self.set(path, merged or None)

    @_store_errors(WriteRejected)
    def remove(self, path: str) -> None:
        partkey, sortkey, inner = self._split_key(path)
        if sortkey is None:
            for item in self._query_partition(partkey):
                utils_db.delete_db_record(partkey, item['sortkey'], table=self.table)
        elif not inner:
            utils_db.delete_db_record(partkey, sortkey, table=self.table)
        else:
            body = self._get_body(partkey, sortkey)
            parent = self._drill(body, inner[:-1])
            if not isinstance(parent, dict) or inner[-1] not in parent:
                return
            del parent[inner[-1]]
            self._put_body(partkey, sortkey, body)
        self.dispatch(path)

    @staticmethod
    def path_from_keys(partkey: str, sortkey: str) -> str:
        if sortkey == keys_structure.singleton_sk:
            return partkey
        return f'{partkey}/{sortkey}'
