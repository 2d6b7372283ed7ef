from flask import Blueprint, jsonify, current_app
from flask_login import login_required

from drivingschool.location.forms import LocationForm
from drivingschool.storage import get_store
from drivingschool.utils.forms import json_payload

location_bp = Blueprint('location', __name__, url_prefix='/api')

DEFAULT_ZOOM = 15


@location_bp.route('/location', methods=['GET'])
def get_location():
    return jsonify(get_store().get_location())


@location_bp.route('/location', methods=['PUT'])
@login_required
def update_location():
    form = LocationForm.from_payload(json_payload()).validate_or_raise()
    location = get_store().save_location({
        'address': form.address.data,
        'phone': form.phone.data or '',
        'hours': form.hours.data or '',
        'latitude': form.latitude.data,
        'longitude': form.longitude.data,
        'zoom': form.zoom.data or DEFAULT_ZOOM
    })
    current_app.logger.info(f"Location moved to {location['address']}")
    return jsonify({'ok': True, 'location': location})
