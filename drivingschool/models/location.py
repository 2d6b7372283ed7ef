from drivingschool import db

# The business has exactly one location row
LOCATION_ID = 1


class Location(db.Model):
    __tablename__ = 'location'

    id = db.Column(db.Integer, primary_key=True)
    address = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(40), nullable=False, default='')
    hours = db.Column(db.String(255), nullable=False, default='')
    latitude = db.Column(db.Float, nullable=False)
    longitude = db.Column(db.Float, nullable=False)
    zoom = db.Column(db.Integer, nullable=False, default=15)

    def __init__(self, address, latitude, longitude, phone='', hours='', zoom=15):
        self.id = LOCATION_ID
        self.address = address
        self.latitude = latitude
        self.longitude = longitude
        self.phone = phone
        self.hours = hours
        self.zoom = zoom

    def to_dict(self):
        return {
            'address': self.address,
            'phone': self.phone,
            'hours': self.hours,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'zoom': self.zoom
        }

    def __repr__(self):
        return f'<Location {self.address} ({self.latitude}, {self.longitude})>'
