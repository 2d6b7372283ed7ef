"""Availability checker against an in-memory appointment set."""
import pytest

from drivingschool.errors import StorageError
from drivingschool.scheduling.availability import check_availability, slot_overview
from drivingschool.storage.defaults import DEFAULT_VEHICLES, DEFAULT_TRAINERS


class MemoryStore:
    def __init__(self, appointments=(), vehicles=DEFAULT_VEHICLES, trainers=DEFAULT_TRAINERS):
        self.appointments = list(appointments)
        self.vehicles = [dict(v) for v in vehicles]
        self.trainers = [dict(t) for t in trainers]
        self.reads = 0

    def list_confirmed_appointments(self, date, time):
        self.reads += 1
        return [a for a in self.appointments
                if a['status'] == 'confirmed' and a['date'] == date and a['time'] == time]

    def list_vehicles(self, active_only=False):
        return [v for v in self.vehicles if not active_only or v['status'] == 'active']

    def list_trainers(self, active_only=False):
        return [t for t in self.trainers if not active_only or t['status'] == 'active']


class BrokenStore:
    def list_confirmed_appointments(self, date, time):
        raise StorageError('disk on fire')


def appointment(id, vehicle='v1', trainer='t1', status='confirmed', date='2024-06-01', time='10:00'):
    return {'id': id, 'vehicleId': vehicle, 'trainerId': trainer, 'status': status, 'date': date, 'time': time}


class TestCheckAvailability:

    def test_no_resources_is_always_available(self):
        store = MemoryStore([appointment('a1', vehicle=None, trainer=None)])
        result = check_availability(store, None, None, '2024-06-01', '10:00')
        assert result.available
        assert result.conflicts == []
        assert store.reads == 0

    def test_confirmed_vehicle_at_slot_conflicts_with_any_trainer(self):
        booked = appointment('a1', vehicle='v1', trainer='t2')
        store = MemoryStore([booked])
        result = check_availability(store, 'v1', 't1', '2024-06-01', '10:00')
        assert not result.available
        assert result.conflicts == [booked]

    def test_shared_trainer_is_a_full_conflict(self):
        booked = appointment('a1', vehicle='v2', trainer='t1')
        result = check_availability(MemoryStore([booked]), 'v1', 't1', '2024-06-01', '10:00')
        assert result.conflicts == [booked]

    @pytest.mark.parametrize('status', ['pending', 'cancelled'])
    def test_unconfirmed_appointments_never_block(self, status):
        store = MemoryStore([appointment('a1', status=status)])
        assert check_availability(store, 'v1', 't1', '2024-06-01', '10:00').available

    def test_other_slots_do_not_block(self):
        store = MemoryStore([
            appointment('a1', time='11:00'),
            appointment('a2', date='2024-06-02'),
        ])
        assert check_availability(store, 'v1', 't1', '2024-06-01', '10:00').available

    def test_excluded_appointment_does_not_conflict_with_itself(self):
        store = MemoryStore([appointment('a1')])
        assert check_availability(store, 'v1', 't1', '2024-06-01', '10:00', exclude_id='a1').available

    def test_unknown_exclusion_has_no_effect(self):
        booked = appointment('a1')
        result = check_availability(MemoryStore([booked]), 'v1', 't1', '2024-06-01', '10:00', exclude_id='zzz')
        assert result.conflicts == [booked]

    def test_missing_candidate_resource_never_matches_missing_stored_one(self):
        # Candidate asks for a vehicle only; the booked lesson has no vehicle and no trainer
        store = MemoryStore([appointment('a1', vehicle=None, trainer=None)])
        assert check_availability(store, 'v1', None, '2024-06-01', '10:00').available

    def test_all_colliding_appointments_are_reported(self):
        by_vehicle = appointment('a1', vehicle='v1', trainer='t2')
        by_trainer = appointment('a2', vehicle='v3', trainer='t1')
        unrelated = appointment('a3', vehicle='v2', trainer='t3')
        store = MemoryStore([by_vehicle, by_trainer, unrelated])
        result = check_availability(store, 'v1', 't1', '2024-06-01', '10:00')
        assert result.conflicts == [by_vehicle, by_trainer]

    def test_deactivating_vehicle_does_not_change_result(self):
        store = MemoryStore([appointment('a1')])
        before = check_availability(store, 'v1', None, '2024-06-01', '10:00')
        store.vehicles[0]['status'] = 'inactive'
        after = check_availability(store, 'v1', None, '2024-06-01', '10:00')
        assert before == after
        assert not after.available

    def test_storage_errors_propagate(self):
        with pytest.raises(StorageError):
            check_availability(BrokenStore(), 'v1', 't1', '2024-06-01', '10:00')

    def test_to_dict(self):
        result = check_availability(MemoryStore(), 'v1', 't1', '2024-06-01', '10:00')
        assert result.to_dict() == {'available': True, 'conflicts': []}


class TestSlotOverview:

    def test_booked_resources_are_removed_from_available_lists(self):
        store = MemoryStore([
            appointment('a1', vehicle='v1', trainer='t1'),
            appointment('a2', vehicle='v2', trainer=None),
            appointment('a3', vehicle='v3', trainer='t3', status='pending'),
        ])
        overview = slot_overview(store, '2024-06-01', '10:00')
        assert overview['bookedVehicles'] == ['v1', 'v2']
        assert overview['bookedTrainers'] == ['t1']
        assert [v['id'] for v in overview['availableVehicles']] == ['v3']
        assert [t['id'] for t in overview['availableTrainers']] == ['t2', 't3']

    def test_inactive_resources_are_not_offered(self):
        store = MemoryStore()
        store.trainers[1]['status'] = 'inactive'
        overview = slot_overview(store, '2024-06-01', '10:00')
        assert [t['id'] for t in overview['availableTrainers']] == ['t1', 't3']
        assert overview['bookedTrainers'] == []
