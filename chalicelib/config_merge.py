"""
Merge of a freshly received website configuration over defaults, the prior in-memory value only
fills the hard fallback scalars and the visible flags the remote leaves undefined.

Pure functions only, the synchronizer in config_store.py feeds them with remote emissions.
Legacy shapes are classified once at ingestion (LegacyList | Wrapped) and normalized to the
canonical wrapper shape, nothing deeper in the stack branches on shapes.
"""
from copy import deepcopy
from typing import Any, Dict, NamedTuple, Optional, Tuple, Union

from chalicelib.constants.default_config import DEFAULT_CONFIG, FOOD_MENU_LIST_KEY, WINE_MENU_LIST_KEY, \
    MENU_GLOBAL_FOOTER_FALLBACK, PRODUCT_BUTTON_TEXT_FALLBACK

# wrapper fields and the key of the list they wrap
WRAPPED_FIELDS = {
    'foodMenu': FOOD_MENU_LIST_KEY,
    'wineMenu': WINE_MENU_LIST_KEY,
}

# lists the realtime store may serialize as objects keyed by index
SPARSE_LIST_FIELDS = ('extraMenus',)

HARD_FALLBACKS: Dict[Tuple[str, ...], Any] = {
    ('menuGlobalFooter',): MENU_GLOBAL_FOOTER_FALLBACK,
    ('philosophy', 'productButtonText'): PRODUCT_BUTTON_TEXT_FALLBACK,
}


class LegacyList(NamedTuple):
    items: list


class Wrapped(NamedTuple):
    fields: dict


def classify_collection(value: Any) -> Optional[Union[LegacyList, Wrapped]]:
    if isinstance(value, list):
        return LegacyList(value)
    if isinstance(value, dict):
        return Wrapped(value)
    return None


def _first_defined(*values):
    for value in values:
        if value is not None:
            return deepcopy(value)
    return None


def _index_order(entry):
    key = str(entry[0])
    if key.isdigit():
        return 0, int(key)
    # non numeric keys keep their insertion order after the numeric ones
    return 1, 0


def normalize_sparse_list(value: Any) -> list:
    """
    A list is kept as is, an object keyed by numeric-like strings becomes the list of its values
    ordered by ascending key, anything else is an empty list
    """
    if isinstance(value, list):
        return deepcopy(value)
    if isinstance(value, dict):
        return [deepcopy(item) for _, item in sorted(value.items(), key=_index_order) if item is not None]
    return []


def normalize_wrapped(value: Any, default_wrapper: dict, list_key: str, prior: Any = None) -> dict:
    tagged = classify_collection(value)
    if tagged is None:
        if prior is None:
            return normalize_wrapped(default_wrapper, default_wrapper, list_key)
        return normalize_wrapped(prior, default_wrapper, list_key)

    merged = deepcopy(default_wrapper)
    if isinstance(tagged, LegacyList):
        merged[list_key] = normalize_sparse_list(tagged.items)
        return merged

    merged.update({key: deepcopy(field) for key, field in tagged.fields.items() if field is not None})
    merged[list_key] = normalize_sparse_list(merged.get(list_key))
    return merged


def is_visible_flag(key: str) -> bool:
    return key == 'visible' or key.endswith('Visible')


def merge_section(default_section: Any, prior_section: Any, remote_section: Any) -> dict:
    """
    defaults, then remote. A None value never overrides, explicit False / 0 do.
    Nested objects are merged one level deeper.
    The prior value only fills visible flags the remote leaves undefined, any other key
    missing remotely falls back to its default
    """
    default_section = default_section if isinstance(default_section, dict) else {}
    prior_section = prior_section if isinstance(prior_section, dict) else {}
    remote_section = remote_section if isinstance(remote_section, dict) else {}

    merged = deepcopy(default_section)
    for key, value in remote_section.items():
        if value is None:
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = {
                **merged[key],
                **{sub_key: deepcopy(sub_value) for sub_key, sub_value in value.items() if sub_value is not None}
            }
        else:
            merged[key] = deepcopy(value)

    for key, value in prior_section.items():
        if is_visible_flag(key) and value is not None and remote_section.get(key) is None:
            merged[key] = value
    return merged


def _apply_hard_fallbacks(merged: dict, remote: dict, prior: dict) -> None:
    for path, fallback in HARD_FALLBACKS.items():
        if path[0] not in merged:
            continue
        *parents, leaf = path
        remote_node, prior_node, merged_node = remote, prior, merged
        for parent in parents:
            remote_node = remote_node.get(parent) if isinstance(remote_node, dict) else None
            prior_node = prior_node.get(parent) if isinstance(prior_node, dict) else None
            merged_node = merged_node.setdefault(parent, {})
        merged_node[leaf] = _first_defined(
            remote_node.get(leaf) if isinstance(remote_node, dict) else None,
            prior_node.get(leaf) if isinstance(prior_node, dict) else None,
            fallback
        )


def merge_config(remote: Any, prior: Optional[dict] = None, defaults: dict = DEFAULT_CONFIG) -> dict:
    """
    Consolidated configuration from a remote emission.
    Every top-level key of defaults is present in the result, unknown top-level keys come from remote only
    """
    remote = remote if isinstance(remote, dict) else {}
    prior = prior if isinstance(prior, dict) else defaults

    merged = {key: deepcopy(value) for key, value in remote.items() if value is not None}
    for key, default_value in defaults.items():
        if key in WRAPPED_FIELDS and isinstance(default_value, dict):
            merged[key] = normalize_wrapped(remote.get(key), default_value, WRAPPED_FIELDS[key], prior.get(key))
        elif key in SPARSE_LIST_FIELDS:
            merged[key] = normalize_sparse_list(remote.get(key))
        elif isinstance(default_value, dict):
            merged[key] = merge_section(default_value, prior.get(key), remote.get(key))
        else:
            merged[key] = _first_defined(remote.get(key), prior.get(key), default_value)

    _apply_hard_fallbacks(merged, remote, prior)
    return merged
