from wtforms import StringField, PasswordField
from wtforms.validators import DataRequired, Length

from drivingschool.utils.forms import ApiForm


class LoginForm(ApiForm):
    username = StringField('Username', validators=[DataRequired()])
    password = PasswordField('Password', validators=[DataRequired()])


class ForgotPasswordForm(ApiForm):
    username = StringField('Username', validators=[DataRequired()])


class ResetPasswordForm(ApiForm):
    resetCode = StringField('Reset code', validators=[DataRequired()])
    newPassword = PasswordField('New password', validators=[
        DataRequired(),
        Length(min=6, message='Password must be at least 6 characters')
    ])
