import pytest

from src.hospital_registry.hospital_registry.staff.doctor import Doctor
from src.hospital_registry.hospital_registry.staff.notifier import StatusChangeNotifier


def make_doctor():
    return Doctor("Ahmad", 12, 15000, "Cardiology")


def test_two_subscribers_called_in_order():
    doctor = make_doctor()
    calls = []
    doctor.subscribe(lambda name, status: calls.append(("first", name, status)))
    doctor.subscribe(lambda name, status: calls.append(("second", name, status)))

    doctor.set_on_duty_status(True)

    assert calls == [("first", "Ahmad", "On Duty"), ("second", "Ahmad", "On Duty")]


def test_off_duty_status_string_and_current_name():
    doctor = make_doctor()
    seen = []
    doctor.subscribe(lambda name, status: seen.append((name, status)))

    doctor.name = "Dr. Ahmad"
    assert doctor.set_on_duty_status(False) == "Off Duty"

    assert seen == [("Dr. Ahmad", "Off Duty")]


def test_no_subscribers_is_a_noop():
    assert make_doctor().set_on_duty_status(True) == "On Duty"


def test_duplicate_subscriptions_fire_twice():
    doctor = make_doctor()
    seen = []

    def handler(name, status):
        seen.append(status)

    doctor.subscribe(handler)
    doctor.subscribe(handler)
    doctor.set_on_duty_status(True)

    assert seen == ["On Duty", "On Duty"]


def test_unsubscribe_removes_one_registration():
    doctor = make_doctor()
    seen = []

    def handler(name, status):
        seen.append(status)

    doctor.subscribe(handler)
    doctor.subscribe(handler)
    doctor.unsubscribe(handler)
    doctor.unsubscribe(lambda name, status: None)
    doctor.set_on_duty_status(False)

    assert seen == ["Off Duty"]


def test_failing_subscriber_propagates_and_stops_chain():
    doctor = make_doctor()
    seen = []

    def boom(name, status):
        raise RuntimeError("subscriber failed")

    doctor.subscribe(boom)
    doctor.subscribe(lambda name, status: seen.append(status))

    with pytest.raises(RuntimeError, match="subscriber failed"):
        doctor.set_on_duty_status(True)
    assert seen == []


def test_notifier_counts_handlers():
    notifier = StatusChangeNotifier()
    notifier.subscribe(print)
    assert len(notifier) == 1
