from wtforms import StringField, FloatField, IntegerField
from wtforms.validators import DataRequired, InputRequired, Length, Optional, NumberRange

from drivingschool.utils.forms import ApiForm


class LocationForm(ApiForm):
    """Business address and the map pin shown to visitors"""
    address = StringField('Address', validators=[DataRequired(), Length(max=255)])
    phone = StringField('Phone', validators=[Optional(), Length(max=40)])
    hours = StringField('Hours', validators=[Optional(), Length(max=255)])
    latitude = FloatField('Latitude', validators=[
        InputRequired(),
        NumberRange(min=-90, max=90, message='Invalid latitude. Must be between -90 and 90.')
    ])
    longitude = FloatField('Longitude', validators=[
        InputRequired(),
        NumberRange(min=-180, max=180, message='Invalid longitude. Must be between -180 and 180.')
    ])
    zoom = IntegerField('Zoom', validators=[Optional(), NumberRange(min=1, max=20)])
