from copy import deepcopy

from chalice import Response

from chalicelib import dependencies
from chalicelib.config_merge import normalize_sparse_list
from chalicelib.constants.constants import IMAGE_LISTS_CAPS, DEFAULT_MAX_IMAGES, DEFAULT_MAX_EXTRA_MENUS, FORM_TYPES
from chalicelib.constants.status_codes import http200
from chalicelib.utils import app as utils_app, auth as utils_auth, data as utils_data
from chalicelib.utils.exceptions import ValidationException
from chalicelib.utils.logger import logger, set_request_id


def _get_cap(admin_settings: dict, key: str, default: int) -> int:
    value = admin_settings.get(key)
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    return default


def sanitize_patch(patch: dict, current_config: dict) -> dict:
    """
    Drops invalid image urls and applies the adminSettings caps to the image lists and extraMenus
    """
    patch = deepcopy(patch)
    hero = patch.get('hero')
    if isinstance(hero, dict) and hero.get('formType') is not None and hero['formType'] not in FORM_TYPES:
        raise ValidationException(f"hero.formType must be one of {', '.join(FORM_TYPES)}")

    admin_settings = {**(current_config.get('adminSettings') or {}), **(patch.get('adminSettings') or {})}

    for (section, field), cap_key in IMAGE_LISTS_CAPS.items():
        section_patch = patch.get(section)
        if not isinstance(section_patch, dict) or field not in section_patch:
            continue
        images = utils_data.filter_image_urls(
            section_patch[field], max_items=_get_cap(admin_settings, cap_key, DEFAULT_MAX_IMAGES))
        if isinstance(section_patch[field], list) and len(images) != len(section_patch[field]):
            logger.info(f'sanitize_patch ::: {section}.{field} {len(section_patch[field])} -> {len(images)} images')
        section_patch[field] = images

    brand = patch.get('brand')
    if isinstance(brand, dict) and brand.get('logoUrl') and not utils_data.is_valid_image_url(brand['logoUrl']):
        logger.info('sanitize_patch ::: brand.logoUrl is not valid, ignored')
        brand.pop('logoUrl')

    if 'extraMenus' in patch:
        patch['extraMenus'] = normalize_sparse_list(patch['extraMenus'])[
            :_get_cap(admin_settings, 'maxExtraMenus', DEFAULT_MAX_EXTRA_MENUS)]
    return patch


def update_config(patch) -> dict:
    if not isinstance(patch, dict) or not patch:
        raise ValidationException('Configuration patch must be a non empty object')
    config_store = dependencies.get_config_store()
    return config_store.update(sanitize_patch(patch, config_store.get()))


@utils_app.request_exception_handler
@utils_app.log_start_finish
def endpoint_get_config(request) -> Response:
    set_request_id(request)
    return Response(status_code=http200, body=dependencies.get_config_store().get())


@utils_app.request_exception_handler
@utils_auth.authenticate
@utils_app.log_start_finish
def endpoint_update_config(request) -> Response:
    document = update_config(utils_data.parse_raw_body(request))
    return Response(status_code=http200, body=document)
