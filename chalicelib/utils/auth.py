import functools
import json
import os
from typing import List

import jwt
from chalice.app import Request

from chalicelib.constants import status_codes
from chalicelib.utils import exceptions as utils_exceptions
from chalicelib.utils.app import error_response
from chalicelib.utils.logger import log_request, logger, log_exception, set_request_id

BEARER_PREFIX = 'Bearer '

_JWKS_CLIENT = None


def get_cognito_idp_url() -> str:
    return f"https://cognito-idp.{os.environ.get('DEFAULT_REGION')}.amazonaws.com/" \
           f"{os.environ.get('COGNITO_ADMIN_POOL_ID')}"


def get_jwks_client() -> jwt.PyJWKClient:
    global _JWKS_CLIENT
    if _JWKS_CLIENT is None:
        _JWKS_CLIENT = jwt.PyJWKClient(f'{get_cognito_idp_url()}/.well-known/jwks.json')
    return _JWKS_CLIENT


def get_super_admin_emails() -> List[str]:
    return [email.strip().lower() for email in os.environ.get('SUPER_ADMIN_EMAILS', '').split(',') if email.strip()]


def get_request_token(request: Request) -> str:
    token = (request.headers or {}).get('authorization') or ''
    if token.startswith(BEARER_PREFIX):
        token = token[len(BEARER_PREFIX):]
    if not token:
        raise utils_exceptions.NotAuthorizedException('Authorization token is missing')
    return token


def decode_token(token: str) -> dict:
    """
    Verifies the Cognito id token, returns the token claims
    """
    try:
        signing_key = get_jwks_client().get_signing_key_from_jwt(token)
        decoded_jwt_token = jwt.decode(
            token,
            signing_key.key,
            algorithms=['RS256'],
            audience=os.environ.get('COGNITO_ADMIN_POOL_CLIENT_ID'),
            issuer=get_cognito_idp_url())
    except jwt.PyJWTError as error:
        setattr(error, 'LEVEL', 'error')
        log_exception(error, status_codes.http401, f"decode_token ::: {error}")
        raise utils_exceptions.AuthorizationException(error)
    logger.debug(f'decode_token ::: token decoded for {decoded_jwt_token.get("email")=}')
    return decoded_jwt_token


def get_auth_result(request: Request) -> dict:
    claims = decode_token(get_request_token(request))
    email = (claims.get('email') or '').lower()
    auth_result = {
        'user_id': claims['sub'],
        'email': email,
        'is_super_admin': email in get_super_admin_emails()
    }
    logger.info(json.dumps({'authenticate': {'user_id': auth_result['user_id'], 'email': email}}))
    return auth_result


def authenticate(func):
    """
    Wrapper for functions which require admin authentication, the request is the first argument
    """

    @functools.wraps(func)
    def result_auth(*args, **kwargs):
        request = args[0]
        try:
            set_request_id(request)
            log_request(request)
            setattr(request, 'auth_result', get_auth_result(request))
        except Exception as err:
            logger.error(f"authenticate ::: {str(err)}")
            return error_response(err, msg=f'{func.__name__}', status_code=status_codes.http401)
        result = func(*args, **kwargs)
        logger.info(f'authenticate ::: SUCCESS, func.__name__ {func.__name__}')
        return result

    return result_auth


def authenticate_super_admin(func):
    """
    Wrapper for the functions available only for the super admins (backups, factory reset)
    """

    @authenticate
    @functools.wraps(func)
    def result_auth(*args, **kwargs):
        request = args[0]
        if not request.auth_result.get('is_super_admin'):
            error = utils_exceptions.AccessDenied(f"{request.auth_result.get('email')} is not a super admin")
            return error_response(error, msg=f'{func.__name__}', status_code=status_codes.http403)
        return func(*args, **kwargs)

    return result_auth
