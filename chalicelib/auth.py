import os

from botocore.exceptions import ClientError
from chalice import Response
from pycognito import Cognito

from chalicelib.constants import status_codes
from chalicelib.utils import app as utils_app, data as utils_data
from chalicelib.utils.exceptions import MandatoryFieldsAreNotFilled
from chalicelib.utils.logger import logger, log_exception, set_request_id

LOGIN_ERROR_MESSAGES = {
    'NotAuthorizedException': 'Correu o contrasenya incorrectes.',
    'UserNotFoundException': 'Correu o contrasenya incorrectes.',
    'TooManyRequestsException': 'Massa intents fallits. Prova-ho més tard.',
    'LimitExceededException': 'Massa intents fallits. Prova-ho més tard.',
}
LOGIN_ERROR_DEFAULT_MESSAGE = 'Error al iniciar sessió. Comprova la connexió.'
LOGIN_MISSING_FIELDS_MESSAGE = 'Escriu el teu correu electrònic i la contrasenya.'

RESET_PASSWORD_MISSING_EMAIL_MESSAGE = 'Escriu el teu correu electrònic per restablir la contrasenya.'
RESET_PASSWORD_ERROR_MESSAGE = "No s'ha pogut enviar el correu. Comprova que l'adreça sigui correcta."
RESET_PASSWORD_SUCCESS_MESSAGE = "T'hem enviat un correu per restablir la contrasenya."


def get_cognito(username: str) -> Cognito:
    return Cognito(os.environ['COGNITO_ADMIN_POOL_ID'], os.environ['COGNITO_ADMIN_POOL_CLIENT_ID'],
                   username=username, user_pool_region=os.environ['DEFAULT_REGION'])


def get_error_code(error: Exception) -> str:
    if isinstance(error, ClientError):
        return error.response.get('Error', {}).get('Code', '')
    return error.__class__.__name__


def login_error_message(error: Exception) -> str:
    return LOGIN_ERROR_MESSAGES.get(get_error_code(error), LOGIN_ERROR_DEFAULT_MESSAGE)


@utils_app.request_exception_handler
def login_cognito(current_request):
    set_request_id(current_request)
    body = utils_data.parse_raw_body(current_request)
    email = (body.get('email') or '').strip()
    password = body.get('password')
    if not email or not password:
        raise MandatoryFieldsAreNotFilled(LOGIN_MISSING_FIELDS_MESSAGE)
    try:
        u = get_cognito(email)
        u.authenticate(password=password)
    except Exception as e:
        logger.warning(f'login_cognito ::: {get_error_code(e)=}')
        log_exception(e, status_codes.http401, 'login_cognito ::: authentication failed')
        return Response(status_code=status_codes.http401, body={'message': login_error_message(e)})
    logger.info('login_cognito ::: SUCCESS')
    return Response(status_code=status_codes.http200, body={
        'token': u.id_token,
        'id_token': u.id_token,
        'access_token': u.access_token,
        'refresh_token': u.refresh_token
    })


@utils_app.request_exception_handler
def reset_password_cognito(current_request):
    set_request_id(current_request)
    email = (utils_data.parse_raw_body(current_request).get('email') or '').strip()
    if not email:
        raise MandatoryFieldsAreNotFilled(RESET_PASSWORD_MISSING_EMAIL_MESSAGE)
    try:
        get_cognito(email).initiate_forgot_password()
    except Exception as e:
        log_exception(e, status_codes.http400, 'reset_password_cognito ::: forgot password failed')
        return Response(status_code=status_codes.http400, body={'message': RESET_PASSWORD_ERROR_MESSAGE})
    logger.info('reset_password_cognito ::: reset email sent')
    return Response(status_code=status_codes.http200, body={'message': RESET_PASSWORD_SUCCESS_MESSAGE})
