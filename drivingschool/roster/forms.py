from wtforms import StringField
from wtforms.validators import DataRequired, Length, Optional, AnyOf

from drivingschool.models.roster import ROSTER_STATUSES
from drivingschool.utils.forms import ApiForm


class RosterUpdateForm(ApiForm):
    """Partial update; only the fields present in the body are applied"""

    def changes(self, payload):
        return {name: self[name].data for name in payload if name in self._fields}


class VehicleForm(ApiForm):
    name = StringField('Name', validators=[DataRequired(), Length(max=100)])
    number = StringField('Number', validators=[DataRequired(), Length(max=40)])
    type = StringField('Type', validators=[DataRequired(), Length(max=40)])


class VehicleUpdateForm(RosterUpdateForm):
    name = StringField('Name', validators=[Optional(), Length(max=100)])
    number = StringField('Number', validators=[Optional(), Length(max=40)])
    type = StringField('Type', validators=[Optional(), Length(max=40)])
    status = StringField('Status', validators=[Optional(), AnyOf(ROSTER_STATUSES)])


class TrainerForm(ApiForm):
    name = StringField('Name', validators=[DataRequired(), Length(max=100)])
    phone = StringField('Phone', validators=[DataRequired(), Length(max=40)])
    experience = StringField('Experience', validators=[Optional(), Length(max=255)])


class TrainerUpdateForm(RosterUpdateForm):
    name = StringField('Name', validators=[Optional(), Length(max=100)])
    phone = StringField('Phone', validators=[Optional(), Length(max=40)])
    experience = StringField('Experience', validators=[Optional(), Length(max=255)])
    status = StringField('Status', validators=[Optional(), AnyOf(ROSTER_STATUSES)])
