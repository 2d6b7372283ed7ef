import copy
import json
import logging
import os
import threading
from contextlib import contextmanager

from drivingschool.errors import StorageError
from drivingschool.models.appointment import STATUS_CONFIRMED
from drivingschool.models.roster import STATUS_ACTIVE
from drivingschool.storage.base import BookingStore
from drivingschool.storage.defaults import DEFAULT_VEHICLES, DEFAULT_TRAINERS, DEFAULT_LOCATION

logger = logging.getLogger(__name__)

APPOINTMENTS_FILE = 'appointments.json'
VEHICLES_FILE = 'vehicles.json'
TRAINERS_FILE = 'trainers.json'
LOCATION_FILE = 'location.json'
ADMIN_FILE = 'admin.json'


class JsonFileStore(BookingStore):
    """
    Keeps each collection in its own pretty-printed JSON file under data_dir.

    A file that does not exist yet reads as its seed value. Writes go to a
    temporary file that replaces the original, and every read-modify-write
    of a file happens under that file's lock.
    """

    def __init__(self, data_dir, default_admin):
        self.data_dir = data_dir
        self.default_admin = default_admin
        self._defaults = {
            APPOINTMENTS_FILE: [],
            VEHICLES_FILE: DEFAULT_VEHICLES,
            TRAINERS_FILE: DEFAULT_TRAINERS,
            LOCATION_FILE: DEFAULT_LOCATION,
            ADMIN_FILE: default_admin,
        }
        self._locks = {filename: threading.Lock() for filename in self._defaults}
        try:
            os.makedirs(data_dir, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create data directory {data_dir}: {e}") from e

    def _path(self, filename):
        return os.path.join(self.data_dir, filename)

    def _read(self, filename):
        path = self._path(filename)
        if not os.path.exists(path):
            return copy.deepcopy(self._defaults[filename])
        try:
            with open(path, encoding='utf-8') as f:
                raw = f.read()
        except OSError as e:
            raise StorageError(f"Cannot read {path}: {e}") from e
        if not raw.strip():
            return copy.deepcopy(self._defaults[filename])
        try:
            return json.loads(raw)
        except ValueError as e:
            raise StorageError(f"Corrupt JSON in {path}: {e}") from e

    def _write(self, filename, data):
        path = self._path(filename)
        tmp_path = f'{path}.tmp'
        try:
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, path)
        except OSError as e:
            raise StorageError(f"Cannot write {path}: {e}") from e

    @contextmanager
    def _editing(self, filename):
        """Yield the file's data under its lock and write it back on success"""
        with self._locks[filename]:
            data = self._read(filename)
            yield data
            self._write(filename, data)

    # Appointments

    def list_appointments(self):
        appointments = self._read(APPOINTMENTS_FILE)
        return sorted(appointments, key=lambda apt: apt.get('createdAt', ''), reverse=True)

    def get_appointment(self, appointment_id):
        for apt in self._read(APPOINTMENTS_FILE):
            if apt['id'] == appointment_id:
                return apt
        return None

    def list_confirmed_appointments(self, date, time):
        return [
            apt for apt in self._read(APPOINTMENTS_FILE)
            if apt.get('status') == STATUS_CONFIRMED and apt.get('date') == date and apt.get('time') == time
        ]

    def insert_appointment(self, record):
        with self._editing(APPOINTMENTS_FILE) as appointments:
            appointments.append(record)
        return record

    def update_appointment(self, appointment_id, record):
        with self._editing(APPOINTMENTS_FILE) as appointments:
            for idx, apt in enumerate(appointments):
                if apt['id'] == appointment_id:
                    appointments[idx] = record
                    return record
        return None

    def delete_appointment(self, appointment_id):
        with self._editing(APPOINTMENTS_FILE) as appointments:
            before = len(appointments)
            appointments[:] = [apt for apt in appointments if apt['id'] != appointment_id]
            removed = before - len(appointments)
        return removed > 0

    # Roster

    def _list(self, filename, active_only):
        items = self._read(filename)
        if active_only:
            return [item for item in items if item.get('status') == STATUS_ACTIVE]
        return items

    def _get(self, filename, item_id):
        for item in self._read(filename):
            if item['id'] == item_id:
                return item
        return None

    def _insert(self, filename, record):
        with self._editing(filename) as items:
            items.append(record)
        return record

    def _update(self, filename, item_id, updates):
        with self._editing(filename) as items:
            for item in items:
                if item['id'] == item_id:
                    item.update(updates)
                    return item
        return None

    def list_vehicles(self, active_only=False):
        return self._list(VEHICLES_FILE, active_only)

    def get_vehicle(self, vehicle_id):
        return self._get(VEHICLES_FILE, vehicle_id)

    def insert_vehicle(self, record):
        return self._insert(VEHICLES_FILE, record)

    def update_vehicle(self, vehicle_id, updates):
        return self._update(VEHICLES_FILE, vehicle_id, updates)

    def list_trainers(self, active_only=False):
        return self._list(TRAINERS_FILE, active_only)

    def get_trainer(self, trainer_id):
        return self._get(TRAINERS_FILE, trainer_id)

    def insert_trainer(self, record):
        return self._insert(TRAINERS_FILE, record)

    def update_trainer(self, trainer_id, updates):
        return self._update(TRAINERS_FILE, trainer_id, updates)

    # Singletons

    def get_location(self):
        return self._read(LOCATION_FILE)

    def save_location(self, record):
        with self._locks[LOCATION_FILE]:
            self._write(LOCATION_FILE, record)
        return record

    def get_admin(self):
        return self._read(ADMIN_FILE)

    def save_admin(self, record):
        with self._locks[ADMIN_FILE]:
            self._write(ADMIN_FILE, record)
        logger.info("Administrator credentials updated for %s", record['username'])
        return record
