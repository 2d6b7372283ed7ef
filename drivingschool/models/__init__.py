# Import all models here for easier imports elsewhere
from .appointment import Appointment
from .roster import Vehicle, Trainer
from .location import Location
from .admin import AdminAccount, AdminUser
