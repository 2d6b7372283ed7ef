from wtforms import StringField, TextAreaField
from wtforms.validators import DataRequired, Email, Length, Optional, AnyOf

from drivingschool.models.appointment import STATUSES
from drivingschool.utils.forms import ApiForm, slot_date, slot_time


class AppointmentForm(ApiForm):
    """Public lesson request"""
    name = StringField('Name', validators=[DataRequired(), Length(max=120)])
    email = StringField('Email', validators=[DataRequired(), Email(), Length(max=120)])
    phone = StringField('Phone', validators=[Optional(), Length(max=40)])
    date = StringField('Date', validators=[DataRequired(), slot_date])
    time = StringField('Time', validators=[DataRequired(), slot_time])
    note = TextAreaField('Note', validators=[Optional(), Length(max=1000)])
    vehicleId = StringField('Vehicle', validators=[Optional(), Length(max=32)])
    trainerId = StringField('Trainer', validators=[Optional(), Length(max=32)])


class AppointmentUpdateForm(ApiForm):
    """Admin edit; every field is optional and only the ones sent are applied"""
    name = StringField('Name', validators=[Optional(), Length(max=120)])
    email = StringField('Email', validators=[Optional(), Email(), Length(max=120)])
    phone = StringField('Phone', validators=[Optional(), Length(max=40)])
    date = StringField('Date', validators=[Optional(), slot_date])
    time = StringField('Time', validators=[Optional(), slot_time])
    note = TextAreaField('Note', validators=[Optional(), Length(max=1000)])
    vehicleId = StringField('Vehicle', validators=[Optional(), Length(max=32)])
    trainerId = StringField('Trainer', validators=[Optional(), Length(max=32)])
    status = StringField('Status', validators=[Optional(), AnyOf(STATUSES)])

    def changes(self, payload):
        return {name: self[name].data for name in payload if name in self._fields}


class SlotQueryForm(ApiForm):
    """Date and time of the slot being looked up"""
    date = StringField('Date', validators=[DataRequired(), slot_date])
    time = StringField('Time', validators=[DataRequired(), slot_time])
