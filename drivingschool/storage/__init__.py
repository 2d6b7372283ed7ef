from flask import current_app
from werkzeug.security import generate_password_hash


BACKENDS = ('json', 'sql')


def init_store(app):
    """Build the store selected by STORAGE_BACKEND and attach it to the app"""
    backend = app.config['STORAGE_BACKEND']
    default_admin = {
        'username': app.config['ADMIN_USERNAME'],
        'passwordHash': generate_password_hash(app.config['ADMIN_PASSWORD'])
    }

    if backend == 'json':
        from drivingschool.storage.json_store import JsonFileStore
        store = JsonFileStore(app.config['DATA_DIR'], default_admin)
    elif backend == 'sql':
        from drivingschool import db
        from drivingschool.storage.sql_store import SqlStore
        store = SqlStore(db, default_admin)
        with app.app_context():
            store.init_schema()
    else:
        raise ValueError(f"Unknown STORAGE_BACKEND {backend!r}, expected one of {BACKENDS}")

    app.extensions['booking_store'] = store
    return store


def get_store():
    return current_app.extensions['booking_store']
