from drivingschool import db

# Roster status constants
STATUS_ACTIVE = 'active'
STATUS_INACTIVE = 'inactive'
ROSTER_STATUSES = (STATUS_ACTIVE, STATUS_INACTIVE)


class Vehicle(db.Model):
    __tablename__ = 'vehicles'

    id = db.Column(db.String(32), primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    number = db.Column(db.String(40), nullable=False)
    type = db.Column(db.String(40), nullable=False)
    status = db.Column(db.String(20), nullable=False, default=STATUS_ACTIVE)

    def __init__(self, id, name, number, type, status=STATUS_ACTIVE):
        self.id = id
        self.name = name
        self.number = number
        self.type = type
        self.status = status

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'number': self.number,
            'type': self.type,
            'status': self.status
        }

    def __repr__(self):
        return f'<Vehicle {self.id} {self.number}>'


class Trainer(db.Model):
    __tablename__ = 'trainers'

    id = db.Column(db.String(32), primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    phone = db.Column(db.String(40), nullable=False)
    experience = db.Column(db.String(255), nullable=False, default='')
    status = db.Column(db.String(20), nullable=False, default=STATUS_ACTIVE)

    def __init__(self, id, name, phone, experience='', status=STATUS_ACTIVE):
        self.id = id
        self.name = name
        self.phone = phone
        self.experience = experience
        self.status = status

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'phone': self.phone,
            'experience': self.experience,
            'status': self.status
        }

    def __repr__(self):
        return f'<Trainer {self.id} {self.name}>'
