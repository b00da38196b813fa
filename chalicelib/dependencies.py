"""
Composition root: the process-wide document store and website configuration store.
"""
import os
from typing import Optional

from chalicelib.config_store import ConfigStore
from chalicelib.document_store import DocumentStore, DynamoDocumentStore, InMemoryDocumentStore
from chalicelib.utils.logger import logger

STORE_BACKEND_MEMORY = 'memory'
STORE_BACKEND_DYNAMODB = 'dynamodb'

_document_store: Optional[DocumentStore] = None
_config_store: Optional[ConfigStore] = None


def get_document_store() -> DocumentStore:
    global _document_store
    if _document_store:
        return _document_store

    backend = os.environ.get('STORE_BACKEND', STORE_BACKEND_DYNAMODB).lower()
    if backend == STORE_BACKEND_MEMORY:
        _document_store = InMemoryDocumentStore()
    else:
        _document_store = DynamoDocumentStore()
    logger.info(f'get_document_store ::: {backend=} store created')
    return _document_store


def set_document_store(document_store: Optional[DocumentStore]) -> None:
    """
    Replaces the store (tests, local development), the configuration store is rebuilt on next access
    """
    global _document_store, _config_store
    if _config_store is not None:
        _config_store.unwatch()
    _document_store = document_store
    _config_store = None


def get_config_store() -> ConfigStore:
    """
    Single ConfigStore per process, watching websiteConfig from its creation.
    Stores that do not push changes of other processes are re-read on every call
    """
    global _config_store
    if _config_store is None:
        _config_store = ConfigStore(get_document_store())
        _config_store.watch()
    elif not _config_store.document_store.pushes_changes:
        _config_store.refresh()
    return _config_store
