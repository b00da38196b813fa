import os

from chalice import Chalice, Response

from chalicelib import auth, backups, messages, profiles, reservations, triggers, website_config
from chalicelib.constants.status_codes import http200

app = Chalice(app_name='restaurant-site-cms')

app.debug = os.environ.get('LOG_LEVEL', 'DEBUG').upper() == 'DEBUG'


def get_gen_table_stream_arn():
    return os.environ.get(
        'GEN_TABLE_STREAM_ARN',
        'arn:aws:dynamodb:eu-west-1:000000000000:table/gen-table/stream/1970-01-01T00:00:00.000'
    )


@app.on_dynamodb_record(stream_arn=get_gen_table_stream_arn())
def db_gen_table_stream_trigger(event):
    return triggers.db_gen_table_stream_trigger(event)


@app.route('/health-check', methods=['GET'], cors=True)
def health_check():
    return Response(status_code=http200, body={'health': 'check'})


# AUTH
@app.route('/auth/login', methods=['POST'], cors=True)
def login():
    return auth.login_cognito(app.current_request)


@app.route('/auth/reset-password', methods=['POST'], cors=True)
def reset_password():
    return auth.reset_password_cognito(app.current_request)


# WEBSITE CONFIG
@app.route('/config', methods=['GET'], cors=True)
def get_config():
    return website_config.endpoint_get_config(app.current_request)


@app.route('/config', methods=['PUT'], cors=True)
def update_config():
    """
    admin operation
    """
    return website_config.endpoint_update_config(app.current_request)


# CONTACT MESSAGES
@app.route('/contact-messages', methods=['POST'], cors=True)
def create_contact_message():
    return messages.ContactMessage.endpoint_create(app.current_request)


@app.route('/contact-messages', methods=['GET'], cors=True)
def get_contact_messages():
    """
    admin operation
    """
    return messages.ContactMessage.endpoint_get_all(app.current_request)


@app.route('/contact-messages/{message_id}/read', methods=['PUT'], cors=True)
def mark_contact_message_as_read(message_id):
    """
    admin operation
    """
    return messages.ContactMessage.endpoint_mark_as_read(app.current_request, message_id)


@app.route('/contact-messages/{message_id}', methods=['DELETE'], cors=True)
def delete_contact_message(message_id):
    """
    admin operation
    """
    return messages.ContactMessage.endpoint_delete(app.current_request, message_id)


# RESERVATIONS
@app.route('/reservations', methods=['POST'], cors=True)
def create_reservation():
    return reservations.Reservation.endpoint_create(app.current_request)


@app.route('/reservations', methods=['GET'], cors=True)
def get_reservations():
    """
    admin operation, optional ?status=pending|confirmed|cancelled
    """
    return reservations.Reservation.endpoint_get_all(app.current_request)


@app.route('/reservations/{reservation_id}', methods=['PUT'], cors=True)
def update_reservation_status(reservation_id):
    """
    admin operation
    """
    return reservations.Reservation.endpoint_update_status(app.current_request, reservation_id)


@app.route('/reservations/{reservation_id}', methods=['DELETE'], cors=True)
def delete_reservation(reservation_id):
    """
    admin operation
    """
    return reservations.Reservation.endpoint_delete(app.current_request, reservation_id)


# ADMIN PANEL
@app.route('/admin/counters', methods=['GET'], cors=True)
def get_admin_counters():
    return profiles.endpoint_get_counters(app.current_request)


@app.route('/profile', methods=['GET'], cors=True)
def get_profile():
    return profiles.endpoint_get_profile(app.current_request)


@app.route('/profile', methods=['PUT'], cors=True)
def update_profile():
    return profiles.endpoint_update_profile(app.current_request)


# BACKUPS
@app.route('/backups', methods=['GET'], cors=True)
def get_backups():
    """
    super admin operation
    """
    return backups.endpoint_get_all(app.current_request)


@app.route('/backups', methods=['POST'], cors=True)
def create_backup():
    """
    super admin operation
    """
    return backups.endpoint_create(app.current_request)


@app.route('/backups/master', methods=['POST'], cors=True)
def set_master_version():
    """
    super admin operation
    """
    return backups.endpoint_set_master(app.current_request)


@app.route('/backups/{backup_id}/restore', methods=['POST'], cors=True)
def restore_backup(backup_id):
    """
    super admin operation
    """
    return backups.endpoint_restore(app.current_request, backup_id)


@app.route('/backups/{backup_id}', methods=['DELETE'], cors=True)
def delete_backup(backup_id):
    """
    super admin operation
    """
    return backups.endpoint_delete(app.current_request, backup_id)


@app.route('/factory-reset', methods=['POST'], cors=True)
def factory_reset():
    """
    super admin operation
    """
    return backups.endpoint_factory_reset(app.current_request)
