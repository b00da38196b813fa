from datetime import datetime
from typing import Dict, Optional

from chalice import Response

from chalicelib import dependencies
from chalicelib.base_class_entity import EntityBase
from chalicelib.constants import keys_structure
from chalicelib.constants.constants import RESERVATION_STATUSES, RESERVATION_STATUS_PENDING
from chalicelib.constants.status_codes import http200, http201
from chalicelib.utils import app as utils_app, auth as utils_auth, data as utils_data
from chalicelib.utils.exceptions import MandatoryFieldsAreNotFilled, PrivacyNotAccepted, \
    ReservationOutsideOpeningHours, ValidationException
from chalicelib.utils.logger import logger, set_request_id

DATE_FORMAT = '%Y-%m-%d'
TIME_FORMAT = '%H:%M'

PRIVACY_NOT_ACCEPTED_MESSAGE = 'Si us plau, accepta la política de privacitat.'
MANDATORY_FIELDS_MESSAGE = 'Si us plau, omple els camps obligatoris.'


def parse_time(value) -> Optional[datetime]:
    try:
        return datetime.strptime(str(value).strip(), TIME_FORMAT)
    except ValueError:
        return None


def parse_date(value) -> Optional[datetime]:
    try:
        return datetime.strptime(str(value).strip(), DATE_FORMAT)
    except ValueError:
        return None


def is_within_opening_hours(time_value: str, hero: Dict) -> bool:
    """
    Both window bounds included, a window not configured accepts any time
    """
    start = parse_time(hero.get('reservationTimeStart'))
    end = parse_time(hero.get('reservationTimeEnd'))
    requested = parse_time(time_value)
    if start is None or end is None:
        return True
    return requested is not None and start <= requested <= end


class Reservation(EntityBase):
    collection_path = keys_structure.reservations_path

    required_immutable_fields_validation = {
        'name': lambda x: isinstance(x, str) and bool(x.strip()),
        'phone': lambda x: isinstance(x, str) and bool(x.strip()),
        'pax': lambda x: isinstance(x, int) and not isinstance(x, bool) and x > 0,
        'date': lambda x: parse_date(x) is not None,
        'time': lambda x: parse_time(x) is not None,
        'dateTimeIso': lambda x: isinstance(x, str),
        'createdAt': lambda x: isinstance(x, int),
        'privacy': lambda x: x is True
    }

    required_mutable_fields_validation = {
        'status': lambda x: x in RESERVATION_STATUSES
    }

    optional_fields_validation = {
        'notes': lambda x: isinstance(x, str)
    }

    def __init__(self, id_=None, **kwargs):
        EntityBase.__init__(self, id_)
        self.name: str = kwargs.get('name')
        self.phone: str = kwargs.get('phone')
        self.pax: int = kwargs.get('pax')
        self.notes: str = kwargs.get('notes')
        self.date: str = kwargs.get('date')
        self.time: str = kwargs.get('time')
        self.dateTimeIso: str = kwargs.get('dateTimeIso')
        self.createdAt: int = kwargs.get('createdAt')
        self.status: str = kwargs.get('status') or RESERVATION_STATUS_PENDING
        self.privacy: bool = kwargs.get('privacy')
        self.record_type = 'reservation'

    @classmethod
    def init_request_create(cls, request):
        body = utils_data.parse_raw_body(request)
        if body.get('privacy') is not True:
            raise PrivacyNotAccepted(PRIVACY_NOT_ACCEPTED_MESSAGE)
        if not all(body.get(key) not in (None, '') for key in ('name', 'phone', 'pax', 'date', 'time')):
            raise MandatoryFieldsAreNotFilled(MANDATORY_FIELDS_MESSAGE)
        try:
            pax = int(body['pax'])
        except (TypeError, ValueError):
            raise ValidationException(f"Number of people is not valid: {body['pax']}")

        hero = dependencies.get_config_store().get().get('hero') or {}
        if not is_within_opening_hours(body['time'], hero):
            raise ReservationOutsideOpeningHours(
                f"{hero.get('reservationErrorMessage')} "
                f"{hero.get('reservationTimeStart')} a {hero.get('reservationTimeEnd')}"
            )
        date, time = str(body['date']).strip(), str(body['time']).strip()
        return cls(
            name=str(body['name']).strip(),
            phone=str(body['phone']).strip(),
            pax=pax,
            notes=body.get('notes') or '',
            date=date,
            time=time,
            dateTimeIso=f'{date}T{time}:00',
            createdAt=utils_data.now_ms(),
            status=RESERVATION_STATUS_PENDING,
            privacy=True
        )

    @classmethod
    def init_by_id(cls, reservation_id):
        c = cls(id_=reservation_id)
        c.__init__(id_=reservation_id, **c._get_db_item())
        return c

    @staticmethod
    @utils_app.request_exception_handler
    @utils_app.log_start_finish
    def endpoint_create(request) -> Response:
        set_request_id(request)
        reservation = Reservation.init_request_create(request)
        reservation._create_db_record()
        return Response(status_code=http201, body={'message': 'Reservation successfully created', 'id': reservation.id_})

    @staticmethod
    @utils_app.request_exception_handler
    @utils_auth.authenticate
    @utils_app.log_start_finish
    def endpoint_get_all(request) -> Response:
        status = (request.query_params or {}).get('status')
        if status is not None and status not in RESERVATION_STATUSES:
            raise ValidationException(f'Unknown reservation status {status}')
        reservations = Reservation._get_all(sort_key='createdAt')
        counts = Reservation.count_by_status(reservations)
        if status is not None:
            reservations = [reservation for reservation in reservations if reservation.status == status]
        logger.info(f'endpoint_get_all ::: {status=}, returning {len(reservations)} reservations, {counts=}')
        return Response(status_code=http200, body={
            'reservations': [reservation._to_ui() for reservation in reservations],
            'counts': counts
        })

    @staticmethod
    @utils_app.request_exception_handler
    @utils_auth.authenticate
    @utils_app.log_start_finish
    def endpoint_update_status(request, reservation_id) -> Response:
        status = utils_data.parse_raw_body(request).get('status')
        if status not in RESERVATION_STATUSES:
            raise ValidationException(f'Unknown reservation status {status}')
        reservation = Reservation.init_by_id(reservation_id)
        reservation._update_db_record({'status': status})
        return Response(status_code=http200, body=reservation._to_ui())

    @staticmethod
    @utils_app.request_exception_handler
    @utils_auth.authenticate
    @utils_app.log_start_finish
    def endpoint_delete(request, reservation_id) -> Response:
        Reservation(id_=reservation_id)._delete_db_record()
        return Response(status_code=http200, body={'message': 'Reservation was successfully deleted',
                                                   'id': reservation_id})

    @staticmethod
    def count_by_status(reservations=None) -> Dict[str, int]:
        if reservations is None:
            reservations = Reservation._get_all(sort_key='createdAt')
        return {
            status: len([reservation for reservation in reservations if reservation.status == status])
            for status in RESERVATION_STATUSES
        }

    def _to_dict(self):
        return {
            'name': self.name,
            'phone': self.phone,
            'pax': self.pax,
            'notes': self.notes,
            'date': self.date,
            'time': self.time,
            'dateTimeIso': self.dateTimeIso,
            'createdAt': self.createdAt,
            'status': self.status,
            'privacy': self.privacy
        }
