from chalice import Response

from chalicelib import dependencies
from chalicelib.constants import keys_structure
from chalicelib.constants.status_codes import http200
from chalicelib.messages import ContactMessage
from chalicelib.reservations import Reservation
from chalicelib.utils import app as utils_app, auth as utils_auth, data as utils_data
from chalicelib.utils.exceptions import ValidationException
from chalicelib.utils.logger import logger


def get_display_name(user_id: str) -> str:
    display_name = dependencies.get_document_store().get(
        keys_structure.admin_profile_display_name_path.format(user_id=user_id))
    return display_name if isinstance(display_name, str) else ''


def set_display_name(user_id: str, display_name) -> str:
    if not isinstance(display_name, str):
        raise ValidationException('displayName must be a string')
    display_name = display_name.strip()
    dependencies.get_document_store().set(
        keys_structure.admin_profile_display_name_path.format(user_id=user_id), display_name)
    logger.info(f'set_display_name ::: {user_id=} display name saved')
    return display_name


@utils_app.request_exception_handler
@utils_auth.authenticate
@utils_app.log_start_finish
def endpoint_get_profile(request) -> Response:
    auth_result = request.auth_result
    return Response(status_code=http200, body={
        'id': auth_result['user_id'],
        'email': auth_result['email'],
        'displayName': get_display_name(auth_result['user_id']),
        'isSuperAdmin': auth_result['is_super_admin']
    })


@utils_app.request_exception_handler
@utils_auth.authenticate
@utils_app.log_start_finish
def endpoint_update_profile(request) -> Response:
    display_name = set_display_name(
        request.auth_result['user_id'],
        utils_data.parse_raw_body(request).get('displayName', '')
    )
    return Response(status_code=http200, body={'displayName': display_name})


@utils_app.request_exception_handler
@utils_auth.authenticate
@utils_app.log_start_finish
def endpoint_get_counters(request) -> Response:
    """
    Notification badges of the admin panel: unread messages and pending reservations
    """
    counters = {
        'inbox': ContactMessage.count_unread(),
        'reservations': Reservation.count_by_status()['pending']
    }
    logger.info(f'endpoint_get_counters ::: {counters=}')
    return Response(status_code=http200, body=counters)
