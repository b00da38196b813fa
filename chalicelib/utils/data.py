import json
import time
from decimal import Decimal
from typing import Any
from urllib.parse import urlparse

from chalicelib.utils.exceptions import DocumentNotSerializable, ValidationException

ALLOWED_IMAGE_URL_SCHEMES = ('http', 'https')
BASE64_IMAGE_PREFIX = 'data:image/'


def replace_dict_key(item, orig_key, new_key):
    if orig_key in item:
        if new_key not in item:
            item[new_key] = item[orig_key]
        del item[orig_key]


def substitute_keys(dict_to_process: dict, base_keys: dict, opt_dict=None):
    if opt_dict is None:
        opt_dict = {}
    all_keys = {**base_keys, **opt_dict}
    for key, val in all_keys.items():
        if val:
            replace_dict_key(dict_to_process, key, val)
        elif key in dict_to_process.keys():
            dict_to_process.pop(key, None)


def parse_raw_body(chalice_request) -> dict:
    request_raw_body = chalice_request.raw_body
    if not request_raw_body:
        return {}
    try:
        body = json.loads(request_raw_body)
    except ValueError as error:
        raise ValidationException(f'Request body is not valid JSON: {error}') from error
    if not isinstance(body, dict):
        raise ValidationException('Request body must be a JSON object')
    return fix_values_from_ui(item=body)


def fix_values_from_ui(item: dict) -> dict:
    """
    Remove keys with None values
    """
    return cleanup_dict(item, [None])


def cleanup_dict(item: dict, list_of_values: list):
    """ Remove None fields in dict with. Supports one nesting.  """

    def sub_clean(sub_item):
        return {
            key: value
            for key, value in sub_item.items()
            if value not in list_of_values
        }

    clean = {}
    for k, v in item.items():
        if isinstance(v, dict):
            nested = sub_clean(v)
            if len(nested.keys()) > 0:
                clean[k] = nested
        elif v not in list_of_values:
            clean[k] = v
    return clean


def _strip_unserializable(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            key: _strip_unserializable(sub_value)
            for key, sub_value in value.items()
            if sub_value is not None and not callable(sub_value)
        }
    if isinstance(value, (list, tuple)):
        return [None if callable(sub_value) else _strip_unserializable(sub_value) for sub_value in value]
    return value


def to_json_safe(value: Any) -> Any:
    """
    JSON round-trip of a document before a whole-document write.
    None-valued and callable object keys are dropped, cyclic structures raise DocumentNotSerializable
    """
    try:
        return json.loads(json.dumps(_strip_unserializable(value), default=_decimal_default))
    except (TypeError, ValueError, RecursionError) as error:
        raise DocumentNotSerializable(f'Document can not be serialized: {error}') from error


def _decimal_default(value):
    if isinstance(value, Decimal):
        return from_db_value(value)
    raise TypeError(f'Object of type {value.__class__.__name__} is not JSON serializable')


def to_db_value(value: Any) -> Any:
    """ DynamoDB does not accept floats """
    return json.loads(json.dumps(value, default=_decimal_default), parse_float=Decimal)


def from_db_value(value: Any) -> Any:
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, dict):
        return {key: from_db_value(sub_value) for key, sub_value in value.items()}
    if isinstance(value, list):
        return [from_db_value(sub_value) for sub_value in value]
    return value


def now_ms() -> int:
    return int(time.time() * 1000)


def is_valid_image_url(url: Any) -> bool:
    if not isinstance(url, str) or not url.strip():
        return False
    url = url.strip()
    if url.startswith(BASE64_IMAGE_PREFIX):
        return ';base64,' in url
    parsed = urlparse(url)
    return parsed.scheme in ALLOWED_IMAGE_URL_SCHEMES and bool(parsed.netloc)


def filter_image_urls(urls: Any, max_items: int = None) -> list:
    if not isinstance(urls, list):
        return []
    valid = [url.strip() for url in urls if is_valid_image_url(url)]
    if max_items is not None:
        valid = valid[:max_items]
    return valid
