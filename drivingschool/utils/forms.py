from datetime import datetime

from flask import request
from flask_wtf import FlaskForm
from werkzeug.datastructures import MultiDict
from wtforms.validators import ValidationError

from drivingschool.errors import InvalidRequest


def json_payload():
    """The request's JSON body, which must be an object"""
    payload = request.get_json(silent=True)
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise InvalidRequest('Request body must be a JSON object')
    return payload


class ApiForm(FlaskForm):
    """Form validated from a JSON body instead of a browser post"""

    class Meta:
        csrf = False

    @classmethod
    def from_payload(cls, payload):
        formdata = MultiDict(
            (key, '' if value is None else str(value))
            for key, value in payload.items()
        )
        return cls(formdata=formdata)

    def validate_or_raise(self):
        if not self.validate():
            field_name, messages = next(iter(self.errors.items()))
            raise InvalidRequest(f'{self[field_name].label.text}: {messages[0]}')
        return self


def slot_date(form, field):
    """Calendar date in YYYY-MM-DD form"""
    try:
        parsed = datetime.strptime(field.data or '', '%Y-%m-%d')
    except ValueError:
        raise ValidationError('Use the YYYY-MM-DD format.')
    if parsed.strftime('%Y-%m-%d') != field.data:
        raise ValidationError('Use the YYYY-MM-DD format.')


def slot_time(form, field):
    """Wall-clock time in 24-hour HH:MM form"""
    try:
        parsed = datetime.strptime(field.data or '', '%H:%M')
    except ValueError:
        raise ValidationError('Use the 24-hour HH:MM format.')
    if parsed.strftime('%H:%M') != field.data:
        raise ValidationError('Use the 24-hour HH:MM format.')
