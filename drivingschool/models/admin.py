from flask import jsonify
from flask_login import UserMixin
from drivingschool import db, login_manager


class AdminAccount(db.Model):
    __tablename__ = 'admins'

    username = db.Column(db.String(80), primary_key=True)
    password_hash = db.Column(db.String(256), nullable=False)

    def __init__(self, username, password_hash):
        self.username = username
        self.password_hash = password_hash

    def to_dict(self):
        return {'username': self.username, 'passwordHash': self.password_hash}

    def __repr__(self):
        return f'<AdminAccount {self.username}>'


class AdminUser(UserMixin):
    """Session identity of the logged in administrator"""

    def __init__(self, username):
        self.id = username

    def __repr__(self):
        return f'<AdminUser {self.id}>'


@login_manager.user_loader
def load_user(id):
    from drivingschool.storage import get_store
    admin = get_store().get_admin()
    if admin and admin['username'] == id:
        return AdminUser(id)
    return None


@login_manager.unauthorized_handler
def unauthorized():
    return jsonify({'error': 'unauthorized'}), 401
