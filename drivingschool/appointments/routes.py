from flask import Blueprint, jsonify, request
from flask_login import login_required

from drivingschool.appointments.forms import AppointmentForm, AppointmentUpdateForm, SlotQueryForm
from drivingschool.errors import InvalidRequest
from drivingschool.scheduling import booking
from drivingschool.scheduling.availability import slot_overview
from drivingschool.scheduling.locks import get_slot_locks
from drivingschool.storage import get_store
from drivingschool.utils.forms import json_payload

appointments_bp = Blueprint('appointments', __name__, url_prefix='/api')


@appointments_bp.route('/appointments', methods=['POST'])
def create_appointment():
    """Public lesson request; starts out pending"""
    form = AppointmentForm.from_payload(json_payload()).validate_or_raise()
    appointment = booking.create_appointment(get_store(), get_slot_locks(), form.data)
    return jsonify({'ok': True, 'appointment': appointment})


@appointments_bp.route('/appointments', methods=['GET'])
@login_required
def list_appointments():
    return jsonify(get_store().list_appointments())


@appointments_bp.route('/appointments/<appointment_id>', methods=['PUT'])
@login_required
def update_appointment(appointment_id):
    """Edit, confirm or cancel an appointment"""
    payload = json_payload()
    form = AppointmentUpdateForm.from_payload(payload).validate_or_raise()
    appointment = booking.update_appointment(get_store(), get_slot_locks(), appointment_id, form.changes(payload))
    return jsonify({'ok': True, 'appointment': appointment})


@appointments_bp.route('/appointments/<appointment_id>', methods=['DELETE'])
@login_required
def delete_appointment(appointment_id):
    booking.delete_appointment(get_store(), appointment_id)
    return jsonify({'ok': True, 'removed': 1})


@appointments_bp.route('/availability', methods=['GET'])
def availability():
    """Which active vehicles and trainers are still free at a date and time"""
    if not request.args.get('date') or not request.args.get('time'):
        raise InvalidRequest('Date and time are required')
    form = SlotQueryForm(formdata=request.args).validate_or_raise()
    return jsonify(slot_overview(get_store(), form.date.data, form.time.data))
