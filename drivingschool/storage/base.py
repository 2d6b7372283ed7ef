from abc import ABC, abstractmethod


class BookingStore(ABC):
    """
    Persistence interface shared by the JSON file and SQL backends.

    Every record crosses this boundary as a plain dict in the API's
    camelCase shape, so callers never see which backend produced it.
    Failures to read or write raise StorageError.
    """

    # Appointments

    @abstractmethod
    def list_appointments(self):
        """All appointments, newest first"""

    @abstractmethod
    def get_appointment(self, appointment_id):
        """The appointment or None"""

    @abstractmethod
    def list_confirmed_appointments(self, date, time):
        """Confirmed appointments whose date and time equal the given slot"""

    @abstractmethod
    def insert_appointment(self, record):
        """Persist a new appointment and return it"""

    @abstractmethod
    def update_appointment(self, appointment_id, record):
        """
        Replace a stored appointment, returning it, or None when the id is
        unknown. Raises SlotTaken when the store refuses a second confirmed
        booking of the same vehicle or trainer for a slot.
        """

    @abstractmethod
    def delete_appointment(self, appointment_id):
        """Remove an appointment; True when something was removed"""

    # Roster

    @abstractmethod
    def list_vehicles(self, active_only=False):
        pass

    @abstractmethod
    def get_vehicle(self, vehicle_id):
        pass

    @abstractmethod
    def insert_vehicle(self, record):
        pass

    @abstractmethod
    def update_vehicle(self, vehicle_id, updates):
        """Merge updates into a vehicle and return it, or None when unknown"""

    @abstractmethod
    def list_trainers(self, active_only=False):
        pass

    @abstractmethod
    def get_trainer(self, trainer_id):
        pass

    @abstractmethod
    def insert_trainer(self, record):
        pass

    @abstractmethod
    def update_trainer(self, trainer_id, updates):
        """Merge updates into a trainer and return it, or None when unknown"""

    # Singletons

    @abstractmethod
    def get_location(self):
        pass

    @abstractmethod
    def save_location(self, record):
        pass

    @abstractmethod
    def get_admin(self):
        """{'username', 'passwordHash'} of the administrator"""

    @abstractmethod
    def save_admin(self, record):
        pass
