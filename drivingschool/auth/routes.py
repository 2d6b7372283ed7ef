from flask import Blueprint, jsonify, current_app, session
from flask_login import login_user, logout_user, current_user
from werkzeug.security import check_password_hash, generate_password_hash

from drivingschool.auth.forms import LoginForm, ForgotPasswordForm, ResetPasswordForm
from drivingschool.errors import InvalidRequest
from drivingschool.models.admin import AdminUser
from drivingschool.storage import get_store
from drivingschool.utils.forms import json_payload

auth_bp = Blueprint('auth', __name__, url_prefix='/api')


def _reset_codes():
    return current_app.extensions['reset_codes']


@auth_bp.route('/login', methods=['POST'])
def login():
    form = LoginForm.from_payload(json_payload())
    admin = get_store().get_admin()

    if form.validate() and form.username.data == admin['username'] \
            and check_password_hash(admin['passwordHash'], form.password.data):
        login_user(AdminUser(admin['username']))
        session.permanent = True
        current_app.logger.info(f"Administrator {admin['username']} logged in")
        return jsonify({'ok': True})

    current_app.logger.warning(f"Failed login attempt for {form.username.data!r}")
    return jsonify({'ok': False, 'error': 'Invalid username or password'}), 401


@auth_bp.route('/logout', methods=['POST'])
def logout():
    if current_user.is_authenticated:
        current_app.logger.info(f"Administrator {current_user.id} logged out")
    logout_user()
    return jsonify({'ok': True})


@auth_bp.route('/forgot-password', methods=['POST'])
def forgot_password():
    """Issue a reset code for the administrator account"""
    form = ForgotPasswordForm.from_payload(json_payload())
    admin = get_store().get_admin()
    if not form.validate() or form.username.data != admin['username']:
        raise InvalidRequest('Username not found')

    code = _reset_codes().issue(admin['username'])
    ttl_minutes = _reset_codes().ttl // 60
    # No mail transport is configured, so the code goes to the server log
    current_app.logger.info(f"Reset code for {admin['username']}: {code} (expires in {ttl_minutes} minutes)")

    body = {
        'ok': True,
        'message': 'Reset code generated successfully. Check the server log for the code.'
    }
    if current_app.config['EXPOSE_RESET_CODE']:
        body['resetCode'] = code
    return jsonify(body)


@auth_bp.route('/reset-password', methods=['POST'])
def reset_password():
    payload = json_payload()
    if not payload.get('resetCode') or not payload.get('newPassword'):
        raise InvalidRequest('Reset code and new password are required')
    form = ResetPasswordForm.from_payload(payload)
    if not form.validate():
        raise InvalidRequest(form.newPassword.errors[0] if form.newPassword.errors else 'Invalid reset request')

    username = _reset_codes().redeem(form.resetCode.data)
    store = get_store()
    admin = store.get_admin()
    if username is None or username != admin['username']:
        raise InvalidRequest('Invalid or expired reset code')

    admin['passwordHash'] = generate_password_hash(form.newPassword.data)
    store.save_admin(admin)
    current_app.logger.info(f"Password reset for {username}")
    return jsonify({
        'ok': True,
        'message': 'Password reset successfully! You can now login with your new password.'
    })
