"""
Vehicle and trainer availability.

A vehicle or trainer is booked for a (date, time) slot only by a confirmed
appointment that references it. Slots are compared as exact strings; there
is no notion of lesson duration or overlap between neighbouring slots.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from drivingschool.models.appointment import STATUS_CONFIRMED


@dataclass
class AvailabilityResult:
    available: bool
    conflicts: List[dict] = field(default_factory=list)

    def to_dict(self):
        return {'available': self.available, 'conflicts': self.conflicts}


def _blocks(apt, vehicle_id, trainer_id, date, time):
    if apt.get('status') != STATUS_CONFIRMED:
        return False
    if apt.get('date') != date or apt.get('time') != time:
        return False
    # A trainer cannot teach two lessons at once whatever the vehicle, so
    # sharing either resource is a full conflict
    if vehicle_id and apt.get('vehicleId') == vehicle_id:
        return True
    return bool(trainer_id) and apt.get('trainerId') == trainer_id


def check_availability(store, vehicle_id: Optional[str], trainer_id: Optional[str],
                       date: str, time: str, exclude_id: Optional[str] = None) -> AvailabilityResult:
    """
    Report the confirmed appointments that already hold the requested
    vehicle or trainer at date/time.

    exclude_id leaves one appointment out of the scan, so an appointment
    being confirmed never conflicts with itself. Storage errors propagate.
    """
    if not vehicle_id and not trainer_id:
        return AvailabilityResult(available=True)

    conflicts = [
        apt for apt in store.list_confirmed_appointments(date, time)
        if apt.get('id') != exclude_id and _blocks(apt, vehicle_id, trainer_id, date, time)
    ]
    return AvailabilityResult(available=not conflicts, conflicts=conflicts)


def _booked_ids(appointments, key):
    seen = []
    for apt in appointments:
        value = apt.get(key)
        if value and value not in seen:
            seen.append(value)
    return seen


def slot_overview(store, date: str, time: str) -> dict:
    """Active vehicles and trainers still free at a slot, and the ids already booked"""
    confirmed = store.list_confirmed_appointments(date, time)
    booked_vehicles = _booked_ids(confirmed, 'vehicleId')
    booked_trainers = _booked_ids(confirmed, 'trainerId')

    return {
        'availableVehicles': [v for v in store.list_vehicles(active_only=True) if v['id'] not in booked_vehicles],
        'availableTrainers': [t for t in store.list_trainers(active_only=True) if t['id'] not in booked_trainers],
        'bookedVehicles': booked_vehicles,
        'bookedTrainers': booked_trainers
    }
