"""
One-time semantic migrations of the stored website configuration.

Every migration is a pure function returning a new document. A migration is a no-op once the
document already carries the field it produces, so running the chain on every ingested version
is safe.
"""
from copy import deepcopy
from typing import Callable, List

from chalicelib.constants.constants import FORM_TYPE_NONE, FORM_TYPE_RESERVATION
from chalicelib.utils.logger import logger

Migration = Callable[[dict], dict]


def migrate_hero_form_type(document: dict) -> dict:
    """
    hero.reservationVisible (bool) predates hero.formType (reservation | contact | none)
    """
    hero = document.get('hero')
    if not isinstance(hero, dict) or hero.get('formType') is not None:
        return document
    migrated = deepcopy(document)
    form_type = FORM_TYPE_NONE if hero.get('reservationVisible') is False else FORM_TYPE_RESERVATION
    migrated['hero']['formType'] = form_type
    logger.info(f'migrate_hero_form_type ::: formType derived from reservationVisible, {form_type=}')
    return migrated


MIGRATIONS: List[Migration] = [
    migrate_hero_form_type,
]


def migrate_config(document: dict) -> dict:
    for migration in MIGRATIONS:
        document = migration(document)
    return document
