from flask import Blueprint, jsonify, current_app
from flask_login import login_required

from drivingschool.errors import InvalidRequest, NotFound
from drivingschool.models.roster import STATUS_ACTIVE, STATUS_INACTIVE
from drivingschool.roster.forms import VehicleForm, VehicleUpdateForm, TrainerForm, TrainerUpdateForm
from drivingschool.storage import get_store
from drivingschool.utils.forms import json_payload
from drivingschool.utils.ids import new_id

roster_bp = Blueprint('roster', __name__, url_prefix='/api')

REQUIRED_UPDATE_FIELDS = ('name', 'number', 'type', 'phone', 'status')


def _required_not_blanked(changes):
    for key in REQUIRED_UPDATE_FIELDS:
        if key in changes and not changes[key]:
            raise InvalidRequest(f'{key} cannot be empty')
    return changes


# Vehicles

@roster_bp.route('/vehicles', methods=['GET'])
def list_vehicles():
    """Vehicles offered on the booking form"""
    return jsonify(get_store().list_vehicles(active_only=True))


@roster_bp.route('/vehicles/all', methods=['GET'])
@login_required
def list_all_vehicles():
    return jsonify(get_store().list_vehicles())


@roster_bp.route('/vehicles', methods=['POST'])
@login_required
def create_vehicle():
    form = VehicleForm.from_payload(json_payload()).validate_or_raise()
    vehicle = get_store().insert_vehicle({
        'id': new_id('v'),
        'name': form.name.data,
        'number': form.number.data,
        'type': form.type.data,
        'status': STATUS_ACTIVE
    })
    current_app.logger.info(f"Vehicle {vehicle['id']} ({vehicle['number']}) added")
    return jsonify({'ok': True, 'vehicle': vehicle})


@roster_bp.route('/vehicles/<vehicle_id>', methods=['PUT'])
@login_required
def update_vehicle(vehicle_id):
    payload = json_payload()
    form = VehicleUpdateForm.from_payload(payload).validate_or_raise()
    vehicle = get_store().update_vehicle(vehicle_id, _required_not_blanked(form.changes(payload)))
    if vehicle is None:
        raise NotFound()
    return jsonify({'ok': True, 'vehicle': vehicle})


@roster_bp.route('/vehicles/<vehicle_id>', methods=['DELETE'])
@login_required
def deactivate_vehicle(vehicle_id):
    """Soft delete; confirmed bookings of the vehicle stay as they are"""
    vehicle = get_store().update_vehicle(vehicle_id, {'status': STATUS_INACTIVE})
    if vehicle is None:
        raise NotFound()
    current_app.logger.info(f"Vehicle {vehicle_id} deactivated")
    return jsonify({'ok': True})


# Trainers

@roster_bp.route('/trainers', methods=['GET'])
def list_trainers():
    """Trainers offered on the booking form"""
    return jsonify(get_store().list_trainers(active_only=True))


@roster_bp.route('/trainers/all', methods=['GET'])
@login_required
def list_all_trainers():
    return jsonify(get_store().list_trainers())


@roster_bp.route('/trainers', methods=['POST'])
@login_required
def create_trainer():
    form = TrainerForm.from_payload(json_payload()).validate_or_raise()
    trainer = get_store().insert_trainer({
        'id': new_id('t'),
        'name': form.name.data,
        'phone': form.phone.data,
        'experience': form.experience.data or '',
        'status': STATUS_ACTIVE
    })
    current_app.logger.info(f"Trainer {trainer['id']} ({trainer['name']}) added")
    return jsonify({'ok': True, 'trainer': trainer})


@roster_bp.route('/trainers/<trainer_id>', methods=['PUT'])
@login_required
def update_trainer(trainer_id):
    payload = json_payload()
    form = TrainerUpdateForm.from_payload(payload).validate_or_raise()
    trainer = get_store().update_trainer(trainer_id, _required_not_blanked(form.changes(payload)))
    if trainer is None:
        raise NotFound()
    return jsonify({'ok': True, 'trainer': trainer})


@roster_bp.route('/trainers/<trainer_id>', methods=['DELETE'])
@login_required
def deactivate_trainer(trainer_id):
    """Soft delete; confirmed bookings of the trainer stay as they are"""
    trainer = get_store().update_trainer(trainer_id, {'status': STATUS_INACTIVE})
    if trainer is None:
        raise NotFound()
    current_app.logger.info(f"Trainer {trainer_id} deactivated")
    return jsonify({'ok': True})
