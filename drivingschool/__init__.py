# Import important modules and create app package
from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_migrate import Migrate
from dotenv import load_dotenv
from datetime import timedelta
import os

# Load environment variables
load_dotenv()

# Initialize extensions
db = SQLAlchemy()
login_manager = LoginManager()
migrate = Migrate()


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def create_app(test_config=None):
    # Initialize app
    app = Flask(__name__, instance_relative_config=True)

    # Configure app
    app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY', 'dev-key')
    app.config['STORAGE_BACKEND'] = os.environ.get('STORAGE_BACKEND', 'json')
    app.config['DATA_DIR'] = os.environ.get('DATA_DIR', os.path.join(app.instance_path, 'data'))
    app.config['SQLALCHEMY_DATABASE_URI'] = os.environ.get(
        'DATABASE_URL',
        'sqlite:///' + os.path.join(app.instance_path, 'driving_school.db')
    )
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['ADMIN_USERNAME'] = os.environ.get('ADMIN_USERNAME', 'admin')
    app.config['ADMIN_PASSWORD'] = os.environ.get('ADMIN_PASSWORD', 'password')
    app.config['RESET_CODE_TTL'] = int(os.environ.get('RESET_CODE_TTL', 15 * 60))
    app.config['EXPOSE_RESET_CODE'] = _env_flag('EXPOSE_RESET_CODE')
    app.config['LOG_LEVEL'] = os.environ.get('LOG_LEVEL', 'INFO')
    app.config['PERMANENT_SESSION_LIFETIME'] = timedelta(days=1)

    if test_config:
        app.config.update(test_config)

    try:
        os.makedirs(app.instance_path)
    except OSError:
        pass

    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions with app
    db.init_app(app)
    login_manager.init_app(app)
    migrate.init_app(app, db)

    # Models register the tables and the Flask-Login user loader
    from drivingschool import models  # noqa: F401

    # Storage backend, slot locks and reset codes live on the app
    from drivingschool.storage import init_store
    from drivingschool.scheduling.locks import SlotLocks
    from drivingschool.utils.reset_codes import ResetCodeStore

    init_store(app)
    app.extensions['slot_locks'] = SlotLocks()
    app.extensions['reset_codes'] = ResetCodeStore(ttl=app.config['RESET_CODE_TTL'])

    # Register blueprints
    from drivingschool.auth.routes import auth_bp
    from drivingschool.appointments.routes import appointments_bp
    from drivingschool.roster.routes import roster_bp
    from drivingschool.location.routes import location_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(appointments_bp)
    app.register_blueprint(roster_bp)
    app.register_blueprint(location_bp)

    from drivingschool.errors import register_error_handlers
    register_error_handlers(app)

    app.logger.info('Driving school API ready (storage backend: %s)', app.config['STORAGE_BACKEND'])
    return app
