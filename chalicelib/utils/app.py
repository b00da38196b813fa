import functools
from typing import Callable

from chalice import Response

from chalicelib.constants import status_codes
from chalicelib.utils.exceptions import MandatoryFieldsAreNotFilled, RecordNotFound, AccessDenied, \
    ValidationException, NotAuthorizedException, AuthorizationException, StoreError, DocumentNotSerializable
from chalicelib.utils.logger import logger, log_exception


def error_response(error: Exception, msg: str = "", status_code: int = 400, *args, **kwargs):
    log_exception(error=error, msg=msg, status_code=status_code, *args, **kwargs)
    return Response(
        body={
            'error': str(error),
            'exception': error.__class__.__name__,
            "message": str(msg),
            'error_id': getattr(logger, 'current_request_id'),
            'level': getattr(error, 'LEVEL', 'exception')
        },
        status_code=status_code,
        headers={'Content-Type': 'application/json'}
    )


def request_exception_handler(func: Callable):
    @functools.wraps(func)
    def result(*args, **kwargs):
        try:
            logger.info(f'Calling function {func.__name__}')
            return func(*args, **kwargs)
        except (MandatoryFieldsAreNotFilled, ValidationException, DocumentNotSerializable) as validation_error:
            # validation messages are shown to the visitor as is
            return error_response(
                error=validation_error,
                msg=str(validation_error),
                status_code=status_codes.http400)
        except RecordNotFound as not_found:
            return error_response(
                error=not_found,
                msg=f'function = {func.__name__} , error = {not_found}',
                status_code=status_codes.http404)
        except (NotAuthorizedException, AuthorizationException) as not_authorized:
            return error_response(
                error=not_authorized,
                msg='Authorization required',
                status_code=status_codes.http401)
        except AccessDenied as access_denied:
            return error_response(
                error=access_denied,
                msg="You don't have permissions to perform this action",
                status_code=status_codes.http403)
        except StoreError as store_error:
            return error_response(
                error=store_error,
                msg='El servei no està disponible. Torna-ho a provar més tard.',
                status_code=status_codes.http503)
        except Exception as exception:
            return error_response(
                error=exception,
                msg=f'function = {func.__name__}, error = {exception}',
                status_code=status_codes.http500)
    return result


def log_start_finish(func: Callable):
    @functools.wraps(func)
    def result(*args, **kwargs):
        logger.info(f'{func.__name__} ::: started')
        response = func(*args, **kwargs)
        logger.info(f'{func.__name__} ::: finished')
        return response
    return result
