import os
from typing import List, Dict

from chalice import Response

from chalicelib import dependencies
from chalicelib.base_class_entity import EntityBase
from chalicelib.constants import keys_structure
from chalicelib.constants.status_codes import http200, http201
from chalicelib.utils import app as utils_app, auth as utils_auth, data as utils_data
from chalicelib.utils.exceptions import MandatoryFieldsAreNotFilled, PrivacyNotAccepted
from chalicelib.utils.logger import logger, log_exception, set_request_id
from chalicelib.utils.notifications import send_email_ses

PRIVACY_NOT_ACCEPTED_MESSAGE = 'Si us plau, accepta la política de privacitat.'
MANDATORY_FIELDS_MESSAGE = 'Si us plau, omple els camps obligatoris.'


def _is_filled_str(value) -> bool:
    return isinstance(value, str) and bool(value.strip())


class ContactMessage(EntityBase):
    collection_path = keys_structure.contact_messages_path

    required_immutable_fields_validation = {
        'name': _is_filled_str,
        'email': _is_filled_str,
        'message': _is_filled_str,
        'privacyAccepted': lambda x: x is True,
        'timestamp': lambda x: isinstance(x, int)
    }

    required_mutable_fields_validation = {
        'read': lambda x: isinstance(x, bool)
    }

    optional_fields_validation = {
        'phone': lambda x: isinstance(x, str),
        'subject': lambda x: isinstance(x, str)
    }

    def __init__(self, id_=None, **kwargs):
        EntityBase.__init__(self, id_)
        self.name: str = kwargs.get('name')
        self.email: str = kwargs.get('email')
        self.phone: str = kwargs.get('phone')
        self.subject: str = kwargs.get('subject')
        self.message: str = kwargs.get('message')
        self.privacyAccepted: bool = kwargs.get('privacyAccepted')
        self.timestamp: int = kwargs.get('timestamp')
        self.read: bool = kwargs.get('read', False)
        self.record_type = 'contact_message'

    @classmethod
    def init_request_create(cls, request):
        body = utils_data.parse_raw_body(request)
        if body.get('privacy') is not True and body.get('privacyAccepted') is not True:
            raise PrivacyNotAccepted(PRIVACY_NOT_ACCEPTED_MESSAGE)
        if not all(_is_filled_str(body.get(key)) for key in ('name', 'email', 'message')):
            raise MandatoryFieldsAreNotFilled(MANDATORY_FIELDS_MESSAGE)
        return cls(
            name=body['name'].strip(),
            email=body['email'].strip(),
            phone=body.get('phone') or '',
            subject=body.get('subject') or '',
            message=body['message'],
            privacyAccepted=True,
            timestamp=utils_data.now_ms(),
            read=False
        )

    @classmethod
    def init_by_id(cls, message_id):
        c = cls(id_=message_id)
        c.__init__(id_=message_id, **c._get_db_item())
        return c

    @staticmethod
    @utils_app.request_exception_handler
    @utils_app.log_start_finish
    def endpoint_create(request) -> Response:
        set_request_id(request)
        contact_message = ContactMessage.init_request_create(request)
        contact_message._create_db_record()
        contact_message.notify()
        return Response(status_code=http201, body={'message': 'Message successfully created', 'id': contact_message.id_})

    @staticmethod
    @utils_app.request_exception_handler
    @utils_auth.authenticate
    @utils_app.log_start_finish
    def endpoint_get_all(request) -> Response:
        messages: List[Dict] = [message._to_ui() for message in ContactMessage._get_all(sort_key='timestamp')]
        logger.info(f'endpoint_get_all ::: returning {len(messages)} messages')
        return Response(status_code=http200, body=messages)

    @staticmethod
    @utils_app.request_exception_handler
    @utils_auth.authenticate
    @utils_app.log_start_finish
    def endpoint_mark_as_read(request, message_id) -> Response:
        contact_message = ContactMessage.init_by_id(message_id)
        contact_message._update_db_record({'read': True})
        return Response(status_code=http200, body=contact_message._to_ui())

    @staticmethod
    @utils_app.request_exception_handler
    @utils_auth.authenticate
    @utils_app.log_start_finish
    def endpoint_delete(request, message_id) -> Response:
        ContactMessage(id_=message_id)._delete_db_record()
        return Response(status_code=http200, body={'message': 'Message was successfully deleted', 'id': message_id})

    @staticmethod
    def count_unread() -> int:
        return len([message for message in ContactMessage._get_all(sort_key='timestamp') if not message.read])

    def notify(self):
        """
        Email to the configured recipients and optional auto-reply to the sender.
        Errors are only logged, the message is already saved
        """
        email_settings = dependencies.get_config_store().get().get('emailSettings') or {}
        recipients = [email for email in email_settings.get('recipients') or [] if _is_filled_str(email)]
        email_from = os.environ.get('NOTIFICATIONS_EMAIL_FROM')
        if not email_settings.get('enabled') or not recipients:
            logger.debug('notify ::: email notifications are disabled')
            return
        if not email_from:
            logger.warning('notify ::: NOTIFICATIONS_EMAIL_FROM is not set, skipping notification')
            return
        try:
            send_email_ses(
                emails_to=recipients,
                email_from=email_from,
                subject=f'Nou Contacte Web - {self.subject or self.name}',
                message=self._notification_text(),
                reply_to=[self.email]
            )
            if email_settings.get('autoReply'):
                send_email_ses(
                    emails_to=[self.email],
                    email_from=email_from,
                    subject=email_settings.get('autoReplySubject') or '',
                    message=email_settings.get('autoReplyMessage') or ''
                )
        except Exception as error:
            log_exception(error, msg=f'notify ::: notification for message {self.id_} failed')

    def _notification_text(self) -> str:
        return (
            f'MISSATGE DE CONTACTE (PEU DE PÀGINA)\n\n'
            f'Nom: {self.name}\nEmail: {self.email}\nTelèfon: {self.phone or "-"}\n\n'
            f'{self.message}'
        )

    def _to_dict(self):
        return {
            'name': self.name,
            'email': self.email,
            'phone': self.phone,
            'subject': self.subject,
            'message': self.message,
            'privacyAccepted': self.privacyAccepted,
            'timestamp': self.timestamp,
            'read': self.read
        }
