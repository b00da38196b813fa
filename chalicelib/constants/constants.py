MASTER_BACKUP_ID = 'master_delivery'

RESERVATION_STATUS_PENDING = 'pending'
RESERVATION_STATUS_CONFIRMED = 'confirmed'
RESERVATION_STATUS_CANCELLED = 'cancelled'
RESERVATION_STATUSES = (RESERVATION_STATUS_PENDING, RESERVATION_STATUS_CONFIRMED, RESERVATION_STATUS_CANCELLED)

FORM_TYPE_RESERVATION = 'reservation'
FORM_TYPE_CONTACT = 'contact'
FORM_TYPE_NONE = 'none'
FORM_TYPES = (FORM_TYPE_RESERVATION, FORM_TYPE_CONTACT, FORM_TYPE_NONE)

BACKUP_NAME_PREFIX = 'Còpia'

DEFAULT_MAX_EXTRA_MENUS = 10
DEFAULT_MAX_IMAGES = 5

# adminSettings cap key for every image list editable from the admin panel
IMAGE_LISTS_CAPS = {
    ('hero', 'backgroundImages'): 'maxHeroImages',
    ('philosophy', 'productImages'): 'maxProductImages',
    ('philosophy', 'historicImages'): 'maxHistoricImages',
}
