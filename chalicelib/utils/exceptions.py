__all__ = ["NotAuthorizedException", "AccessDenied", "RecordNotFound", "NumberOfRetriesExceeded",
           "MandatoryFieldsAreNotFilled", "ValidationException", "AuthorizationException",
           "PrivacyNotAccepted", "ReservationOutsideOpeningHours", "StoreError", "WriteRejected",
           "ReadFailed", "DocumentNotSerializable"]


class NotAuthorizedException(Exception):
    pass


# Generic Exceptions
class AccessDenied(Exception):
    LEVEL = 'warning'


class MandatoryFieldsAreNotFilled(Exception):
    pass


# Store exceptions
class RecordNotFound(Exception):
    LEVEL = 'warning'


class StoreError(Exception):
    pass


class WriteRejected(StoreError):
    pass


class ReadFailed(StoreError):
    pass


class DocumentNotSerializable(Exception):
    pass


# DB Performance Exception
class NumberOfRetriesExceeded(StoreError):
    pass


# Validations exceptions
class ValidationException(Exception):
    pass


class PrivacyNotAccepted(ValidationException):
    pass


class ReservationOutsideOpeningHours(ValidationException):
    pass


class AuthorizationException(Exception):
    pass
