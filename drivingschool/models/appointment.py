from drivingschool import db

# Appointment status constants
STATUS_PENDING = 'pending'
STATUS_CONFIRMED = 'confirmed'
STATUS_CANCELLED = 'cancelled'
STATUSES = (STATUS_PENDING, STATUS_CONFIRMED, STATUS_CANCELLED)


def _while_confirmed(column):
    return f"CASE WHEN status = '{STATUS_CONFIRMED}' THEN {column} END"


class Appointment(db.Model):
    __tablename__ = 'appointments'

    id = db.Column(db.String(32), primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(120), nullable=False)
    phone = db.Column(db.String(40), nullable=False, default='')
    date = db.Column(db.String(10), nullable=False, index=True)
    time = db.Column(db.String(5), nullable=False)
    note = db.Column(db.Text, nullable=False, default='')
    vehicle_id = db.Column(db.String(32), nullable=True)
    trainer_id = db.Column(db.String(32), nullable=True)
    status = db.Column(db.String(20), nullable=False, default=STATUS_PENDING)
    created_at = db.Column(db.String(32), nullable=False)

    # NULL unless confirmed; unique indexes ignore NULLs on SQLite, PostgreSQL and MySQL
    confirmed_vehicle_id = db.Column(db.String(32), db.Computed(_while_confirmed('vehicle_id')))
    confirmed_trainer_id = db.Column(db.String(32), db.Computed(_while_confirmed('trainer_id')))

    # A vehicle or trainer can hold only one confirmed booking per slot
    __table_args__ = (
        db.Index('uq_confirmed_vehicle_slot', 'confirmed_vehicle_id', 'date', 'time', unique=True),
        db.Index('uq_confirmed_trainer_slot', 'confirmed_trainer_id', 'date', 'time', unique=True),
    )

    def __init__(self, id, name, email, date, time, created_at, phone='', note='',
                 vehicle_id=None, trainer_id=None, status=STATUS_PENDING):
        self.id = id
        self.name = name
        self.email = email
        self.date = date
        self.time = time
        self.created_at = created_at
        self.phone = phone
        self.note = note
        self.vehicle_id = vehicle_id
        self.trainer_id = trainer_id
        self.status = status

    @classmethod
    def from_dict(cls, record):
        return cls(
            id=record['id'],
            name=record['name'],
            email=record['email'],
            date=record['date'],
            time=record['time'],
            created_at=record['createdAt'],
            phone=record.get('phone') or '',
            note=record.get('note') or '',
            vehicle_id=record.get('vehicleId'),
            trainer_id=record.get('trainerId'),
            status=record.get('status', STATUS_PENDING)
        )

    def update_from_dict(self, record):
        """Copy the editable fields of an API-shaped record onto the row"""
        self.name = record['name']
        self.email = record['email']
        self.phone = record.get('phone') or ''
        self.date = record['date']
        self.time = record['time']
        self.note = record.get('note') or ''
        self.vehicle_id = record.get('vehicleId')
        self.trainer_id = record.get('trainerId')
        self.status = record['status']

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'phone': self.phone,
            'date': self.date,
            'time': self.time,
            'note': self.note,
            'vehicleId': self.vehicle_id,
            'trainerId': self.trainer_id,
            'status': self.status,
            'createdAt': self.created_at
        }

    def is_confirmed(self):
        return self.status == STATUS_CONFIRMED

    def __repr__(self):
        return f'<Appointment {self.id}: {self.date} {self.time} ({self.status})>'
