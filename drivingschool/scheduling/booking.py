"""
Appointment workflow: create, update (including confirm) and delete.

Both places that can put a vehicle or trainer into a confirmed booking run
the availability check and the write inside the slot's lock, so two
concurrent requests for the same slot cannot both pass the check.
"""
import logging

from drivingschool.errors import InvalidRequest, NotFound, SlotConflict, SlotTaken
from drivingschool.models.appointment import STATUSES, STATUS_PENDING, STATUS_CONFIRMED, STATUS_CANCELLED
from drivingschool.scheduling.availability import check_availability
from drivingschool.utils.ids import new_id, utc_timestamp

logger = logging.getLogger(__name__)

SLOT_FULL_MESSAGE = 'Slot is full. This vehicle or trainer is already booked for the selected date and time.'
CONFIRM_SLOT_FULL_MESSAGE = f'Cannot confirm: {SLOT_FULL_MESSAGE}'

EDITABLE_FIELDS = ('name', 'email', 'phone', 'date', 'time', 'note', 'vehicleId', 'trainerId', 'status')
SLOT_FIELDS = ('date', 'time', 'vehicleId', 'trainerId')

# Times a write refused by the store is checked and attempted again
CLASH_RETRIES = 1


def _clean_ref(value):
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _check_references(store, vehicle_id, trainer_id):
    if vehicle_id and store.get_vehicle(vehicle_id) is None:
        raise InvalidRequest(f'Unknown vehicle {vehicle_id}')
    if trainer_id and store.get_trainer(trainer_id) is None:
        raise InvalidRequest(f'Unknown trainer {trainer_id}')


def create_appointment(store, locks, fields):
    """
    Store a new pending appointment.

    When a vehicle or a trainer is requested, the request is refused with
    SlotConflict if either is already confirmed for the same date and time.
    """
    record = {
        'id': new_id(),
        'name': fields['name'],
        'email': fields['email'],
        'phone': fields.get('phone') or '',
        'date': fields['date'],
        'time': fields['time'],
        'note': fields.get('note') or '',
        'vehicleId': _clean_ref(fields.get('vehicleId')),
        'trainerId': _clean_ref(fields.get('trainerId')),
        'status': STATUS_PENDING,
        'createdAt': utc_timestamp()
    }
    _check_references(store, record['vehicleId'], record['trainerId'])

    clashes = 0
    with locks.hold(record['date'], record['time']):
        while True:
            if record['vehicleId'] or record['trainerId']:
                result = check_availability(store, record['vehicleId'], record['trainerId'],
                                            record['date'], record['time'])
                if not result.available:
                    logger.warning("Rejected booking for %s %s: vehicle %s / trainer %s already confirmed",
                                   record['date'], record['time'], record['vehicleId'], record['trainerId'])
                    raise SlotConflict(SLOT_FULL_MESSAGE, result.conflicts)
            try:
                appointment = store.insert_appointment(record)
            except SlotTaken:
                clashes = _count_clash(clashes, record, SLOT_FULL_MESSAGE)
                continue
            break

    logger.info("Appointment %s requested for %s %s", appointment['id'], appointment['date'], appointment['time'])
    return appointment


def _count_clash(clashes, record, message):
    """
    Count a write the store refused although the availability check let it
    through. Past CLASH_RETRIES the refusal is reported as a conflict even
    when no holder of the slot can be named.
    """
    clashes += 1
    if clashes > CLASH_RETRIES:
        raise SlotConflict(message, [])
    logger.warning("Store refused a booking for %s %s; checking the slot again", record['date'], record['time'])
    return clashes


def _clean_updates(updates):
    changes = {key: value for key, value in updates.items() if key in EDITABLE_FIELDS}
    for key in ('vehicleId', 'trainerId'):
        if key in changes:
            changes[key] = _clean_ref(changes[key])
    for key in ('phone', 'note'):
        if key in changes and changes[key] is None:
            changes[key] = ''
    for key in ('name', 'email', 'date', 'time', 'status'):
        if key in changes and not changes[key]:
            raise InvalidRequest(f'{key} cannot be empty')
    if 'status' in changes and changes['status'] not in STATUSES:
        raise InvalidRequest(f"Invalid status {changes['status']!r}")
    return changes


def _needs_check(current, merged, changes):
    if merged['status'] != STATUS_CONFIRMED:
        return False
    if not (merged.get('vehicleId') or merged.get('trainerId')):
        return False
    if changes.get('status') == STATUS_CONFIRMED:
        return True
    # Already confirmed: only moving it to another slot or resource is gated
    return any(merged.get(key) != current.get(key) for key in SLOT_FIELDS)


def update_appointment(store, locks, appointment_id, updates):
    """
    Apply a partial update to an appointment.

    A result that is confirmed and holds a vehicle or trainer is checked
    against the other confirmed appointments at its slot (never against
    itself). On conflict SlotConflict is raised and the stored appointment
    keeps its previous state.
    """
    changes = _clean_updates(updates)
    _check_references(store, changes.get('vehicleId'), changes.get('trainerId'))

    clashes = 0
    while True:
        existing = store.get_appointment(appointment_id)
        if existing is None:
            raise NotFound()
        target = {**existing, **changes}

        with locks.hold(target['date'], target['time']):
            current = store.get_appointment(appointment_id)
            if current is None:
                raise NotFound()
            merged = {**current, **changes}
            if (merged['date'], merged['time']) != (target['date'], target['time']):
                # Moved by a concurrent edit while we waited; lock the new slot
                continue

            if _needs_check(current, merged, changes):
                result = check_availability(store, merged.get('vehicleId'), merged.get('trainerId'),
                                            merged['date'], merged['time'], exclude_id=appointment_id)
                if not result.available:
                    logger.warning("Refused to confirm appointment %s for %s %s: %d conflict(s)",
                                   appointment_id, merged['date'], merged['time'], len(result.conflicts))
                    raise SlotConflict(CONFIRM_SLOT_FULL_MESSAGE, result.conflicts)

            try:
                saved = store.update_appointment(appointment_id, merged)
            except SlotTaken:
                # The store's own uniqueness guarantee caught a booking the check missed
                result = check_availability(store, merged.get('vehicleId'), merged.get('trainerId'),
                                            merged['date'], merged['time'], exclude_id=appointment_id)
                if result.conflicts:
                    raise SlotConflict(CONFIRM_SLOT_FULL_MESSAGE, result.conflicts)
                # The clashing booking is already gone
                clashes = _count_clash(clashes, merged, CONFIRM_SLOT_FULL_MESSAGE)
                continue
            if saved is None:
                raise NotFound()
            break

    if current['status'] != saved['status']:
        if saved['status'] == STATUS_CONFIRMED:
            logger.info("Appointment %s confirmed for %s %s", appointment_id, saved['date'], saved['time'])
        elif saved['status'] == STATUS_CANCELLED:
            logger.info("Appointment %s cancelled", appointment_id)
    return saved


def delete_appointment(store, appointment_id):
    """Remove an appointment whatever its status"""
    if not store.delete_appointment(appointment_id):
        raise NotFound()
    logger.info("Appointment %s deleted", appointment_id)
