import logging
from functools import wraps

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from drivingschool.errors import StorageError, SlotTaken
from drivingschool.models.admin import AdminAccount
from drivingschool.models.appointment import Appointment, STATUS_CONFIRMED
from drivingschool.models.location import Location, LOCATION_ID
from drivingschool.models.roster import Vehicle, Trainer, STATUS_ACTIVE
from drivingschool.storage.base import BookingStore
from drivingschool.storage.defaults import DEFAULT_VEHICLES, DEFAULT_TRAINERS, DEFAULT_LOCATION

logger = logging.getLogger(__name__)

SLOT_INDEXES = ('uq_confirmed_vehicle_slot', 'uq_confirmed_trainer_slot')


def _is_slot_clash(error):
    # PostgreSQL and MySQL name the index, SQLite lists the indexed columns
    text = str(getattr(error, 'orig', error))
    if any(name in text for name in SLOT_INDEXES):
        return True
    return 'appointments.confirmed_vehicle_id' in text or 'appointments.confirmed_trainer_id' in text


def translate_errors(func):
    """Roll back and re-raise database failures as storage errors"""
    @wraps(func)
    def wrapper(self, *args, **kwargs):
        try:
            return func(self, *args, **kwargs)
        except IntegrityError as e:
            self.db.session.rollback()
            if _is_slot_clash(e):
                raise SlotTaken(str(e.orig)) from e
            raise StorageError(f"Integrity error in {func.__name__}: {e.orig}") from e
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise StorageError(f"Database error in {func.__name__}: {e}") from e
    return wrapper


class SqlStore(BookingStore):
    """
    Relational backend on Flask-SQLAlchemy.

    Besides the application-level check, the appointments table carries
    unique indexes over generated columns that hold the vehicle and trainer
    of confirmed rows only, so the database itself refuses a second
    confirmed booking of a vehicle or trainer for a slot.
    """

    def __init__(self, db, default_admin):
        self.db = db
        self.default_admin = default_admin

    @translate_errors
    def init_schema(self):
        """Create missing tables and seed empty ones"""
        self.db.create_all()
        session = self.db.session

        if Vehicle.query.count() == 0:
            for vehicle in DEFAULT_VEHICLES:
                session.add(Vehicle(**vehicle))
        if Trainer.query.count() == 0:
            for trainer in DEFAULT_TRAINERS:
                session.add(Trainer(**trainer))
        if session.get(Location, LOCATION_ID) is None:
            session.add(Location(**DEFAULT_LOCATION))
        if AdminAccount.query.count() == 0:
            session.add(AdminAccount(
                username=self.default_admin['username'],
                password_hash=self.default_admin['passwordHash']
            ))

        session.commit()
        logger.info("Database schema ready")

    # Appointments

    @translate_errors
    def list_appointments(self):
        rows = Appointment.query.order_by(Appointment.created_at.desc()).all()
        return [row.to_dict() for row in rows]

    @translate_errors
    def get_appointment(self, appointment_id):
        row = self.db.session.get(Appointment, appointment_id)
        return row.to_dict() if row else None

    @translate_errors
    def list_confirmed_appointments(self, date, time):
        rows = Appointment.query.filter_by(status=STATUS_CONFIRMED, date=date, time=time).all()
        return [row.to_dict() for row in rows]

    @translate_errors
    def insert_appointment(self, record):
        row = Appointment.from_dict(record)
        self.db.session.add(row)
        self.db.session.commit()
        return row.to_dict()

    @translate_errors
    def update_appointment(self, appointment_id, record):
        row = self.db.session.get(Appointment, appointment_id)
        if row is None:
            return None
        row.update_from_dict(record)
        self.db.session.commit()
        return row.to_dict()

    @translate_errors
    def delete_appointment(self, appointment_id):
        row = self.db.session.get(Appointment, appointment_id)
        if row is None:
            return False
        self.db.session.delete(row)
        self.db.session.commit()
        return True

    # Roster

    def _list(self, model, active_only):
        query = model.query
        if active_only:
            query = query.filter_by(status=STATUS_ACTIVE)
        return [row.to_dict() for row in query.order_by(model.id).all()]

    def _get(self, model, item_id):
        row = self.db.session.get(model, item_id)
        return row.to_dict() if row else None

    def _insert(self, model, record):
        row = model(**record)
        self.db.session.add(row)
        self.db.session.commit()
        return row.to_dict()

    def _update(self, model, item_id, updates):
        row = self.db.session.get(model, item_id)
        if row is None:
            return None
        for key, value in updates.items():
            setattr(row, key, value)
        self.db.session.commit()
        return row.to_dict()

    @translate_errors
    def list_vehicles(self, active_only=False):
        return self._list(Vehicle, active_only)

    @translate_errors
    def get_vehicle(self, vehicle_id):
        return self._get(Vehicle, vehicle_id)

    @translate_errors
    def insert_vehicle(self, record):
        return self._insert(Vehicle, record)

    @translate_errors
    def update_vehicle(self, vehicle_id, updates):
        return self._update(Vehicle, vehicle_id, updates)

    @translate_errors
    def list_trainers(self, active_only=False):
        return self._list(Trainer, active_only)

    @translate_errors
    def get_trainer(self, trainer_id):
        return self._get(Trainer, trainer_id)

    @translate_errors
    def insert_trainer(self, record):
        return self._insert(Trainer, record)

    @translate_errors
    def update_trainer(self, trainer_id, updates):
        return self._update(Trainer, trainer_id, updates)

    # Singletons

    @translate_errors
    def get_location(self):
        row = self.db.session.get(Location, LOCATION_ID)
        return row.to_dict() if row else dict(DEFAULT_LOCATION)

    @translate_errors
    def save_location(self, record):
        row = self.db.session.get(Location, LOCATION_ID)
        if row is None:
            row = Location(**record)
            self.db.session.add(row)
        else:
            for key, value in record.items():
                setattr(row, key, value)
        self.db.session.commit()
        return row.to_dict()

    @translate_errors
    def get_admin(self):
        row = AdminAccount.query.first()
        return row.to_dict() if row else dict(self.default_admin)

    @translate_errors
    def save_admin(self, record):
        AdminAccount.query.delete()
        self.db.session.add(AdminAccount(username=record['username'], password_hash=record['passwordHash']))
        self.db.session.commit()
        logger.info("Administrator credentials updated for %s", record['username'])
        return record
