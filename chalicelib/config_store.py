from copy import deepcopy
from typing import Any, Callable, List, Optional

from chalicelib.config_merge import merge_config
from chalicelib.config_migrations import migrate_config
from chalicelib.constants import keys_structure
from chalicelib.constants.default_config import DEFAULT_CONFIG
from chalicelib.document_store import DocumentStore
from chalicelib.utils.data import to_json_safe
from chalicelib.utils.exceptions import StoreError
from chalicelib.utils.logger import logger, log_exception

Listener = Callable[[dict], None]


class ConfigStore:
    """
    Keeps one fully populated website configuration in memory, current with the remote document.

    remote emission -> migrate -> merge -> broadcast to listeners.
    Writes are whole-document, the last write wins.
    """

    def __init__(self, document_store: DocumentStore, path: str = keys_structure.website_config_path,
                 defaults: Optional[dict] = None):
        self.document_store = document_store
        self.path = path
        self.defaults: dict = deepcopy(defaults if defaults is not None else DEFAULT_CONFIG)
        self._config: dict = deepcopy(self.defaults)
        self._listeners: List[Listener] = []
        self._unwatch: Optional[Callable[[], None]] = None
        self._last_published: Optional[dict] = None
        self.is_loading = True

    def get(self) -> dict:
        return deepcopy(self._config)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def dispose():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return dispose

    def watch(self) -> Callable[[], None]:
        """
        Starts the single watch on the remote document, a second call returns the same disposer
        """
        if self._unwatch is None:
            logger.info(f'watch ::: subscribing to {self.path=}')
            self._unwatch = self.document_store.watch(self.path, self._on_remote_value)
        return self.unwatch

    def unwatch(self) -> None:
        if self._unwatch is not None:
            self._unwatch()
            self._unwatch = None
            logger.info(f'unwatch ::: {self.path=} watch cancelled')

    @property
    def is_watching(self) -> bool:
        return self._unwatch is not None

    def refresh(self) -> None:
        """
        Re-reads the remote document and handles it as an emission.
        Used where the store does not push changes made by other processes
        """
        self._on_remote_value(self.document_store.get(self.path))

    def _on_remote_value(self, value: Any) -> None:
        if value is None:
            logger.info(f'_on_remote_value ::: {self.path=} does not exist, writing default configuration')
            try:
                self.document_store.set(self.path, to_json_safe(self.defaults))
            except StoreError as error:
                log_exception(error, msg='_on_remote_value ::: error creating default configuration')
            self._config = deepcopy(self.defaults)
        else:
            self._config = merge_config(migrate_config(value), prior=self._config, defaults=self.defaults)
        self.is_loading = False
        self._publish()

    def _publish(self) -> None:
        # listeners see every distinct value once, write echoes of the same value are skipped
        if self._config == self._last_published:
            return
        self._last_published = deepcopy(self._config)
        for listener in list(self._listeners):
            listener(self.get())

    def update(self, patch: dict) -> dict:
        """
        Optimistic shallow merge, then whole-document write.
        A rejected write raises and leaves the optimistic value in place
        """
        merged = {**self._config, **deepcopy(patch)}
        self._config = merged
        self._publish()
        document = to_json_safe(merged)
        self.document_store.set(self.path, document)
        logger.info(f'update ::: {self.path=} saved, keys={sorted(patch.keys())}')
        return document

    def replace(self, document: dict) -> dict:
        """
        Total overwrite, keys absent from document are dropped
        """
        self._config = deepcopy(document)
        self._publish()
        safe_document = to_json_safe(document)
        self.document_store.set(self.path, safe_document)
        logger.info(f'replace ::: {self.path=} overwritten')
        return safe_document
