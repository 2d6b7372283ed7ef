"""
Domain exceptions for the booking API.

Each exception knows its HTTP status and how to render itself as the JSON
body the API returns, so routes and the scheduling code can simply raise.
"""
from flask import jsonify
from werkzeug.exceptions import HTTPException


class DrivingSchoolError(Exception):
    """Base exception for all domain errors."""
    status_code = 500

    def __init__(self, message):
        self.message = message
        super().__init__(message)

    def to_dict(self):
        return {'error': self.message}


class InvalidRequest(DrivingSchoolError):
    """Missing or malformed request data."""
    status_code = 400


class SlotConflict(DrivingSchoolError):
    """The requested vehicle or trainer is already confirmed for the slot."""
    status_code = 400

    def __init__(self, message, conflicts):
        super().__init__(message)
        self.conflicts = list(conflicts)

    def to_dict(self):
        return {'error': self.message, 'conflicts': self.conflicts}


class NotFound(DrivingSchoolError):
    status_code = 404

    def __init__(self, message='not found'):
        super().__init__(message)


class StorageError(DrivingSchoolError):
    """
    Reading or writing a storage collection failed.

    The message is for the server log only; callers get a generic body.
    """
    status_code = 500

    def to_dict(self):
        return {'error': 'Internal server error'}


class SlotTaken(Exception):
    """
    Raised by a store when its own uniqueness guarantee rejects a write
    that would confirm a second booking of a vehicle or trainer for a slot.
    """


def register_error_handlers(app):
    @app.errorhandler(DrivingSchoolError)
    def handle_domain_error(error):
        if isinstance(error, StorageError):
            app.logger.error(f"Storage failure: {error.message}", exc_info=error)
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({'error': error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        app.logger.error(f"Unhandled error: {error}", exc_info=error)
        return jsonify({'error': 'Internal server error'}), 500
