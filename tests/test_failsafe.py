import pytest

from dronenav.common import MavState
from dronenav.failsafe import AvoidanceNode, CompanionStatus


@pytest.fixture
def sent():
    return []


@pytest.fixture
def node(sent):
    return AvoidanceNode(sent.append)


def test_starts_in_boot_state(node):
    assert node.state == MavState.BOOT
    assert node.timeout_termination == 15
    assert node.timeout_critical == 0.5
    assert node.timeout_startup == 5.0


def test_publish_sends_current_state(node, sent):
    node.set_system_status(MavState.ACTIVE)
    returned = node.publish_system_status()
    assert len(sent) == 1
    assert sent[0] is returned
    assert isinstance(sent[0], CompanionStatus)
    assert sent[0].component == 196
    assert sent[0].state == MavState.ACTIVE


def test_long_timeouts_terminate_flight(node):
    hover = node.check_failsafe(16.0, 16.0, False)
    assert hover is False
    assert node.state == MavState.FLIGHT_TERMINATION


def test_termination_needs_both_times_exceeded(node):
    hover = node.check_failsafe(16.0, 3.0, False)
    assert hover is False
    assert node.state == MavState.ACTIVE


def test_termination_timeout_is_strict(node):
    node.check_failsafe(15.0, 15.0, False)
    assert node.state == MavState.CRITICAL


def test_missing_cloud_after_startup_makes_vehicle_hover(node):
    hover = node.check_failsafe(1.0, 10.0, False)
    assert hover is True
    assert node.state == MavState.CRITICAL


def test_missing_cloud_during_startup_keeps_active(node):
    hover = node.check_failsafe(1.0, 4.0, False)
    assert hover is False
    assert node.state == MavState.ACTIVE


def test_without_position_no_hover_and_state_kept(node):
    node.position_received = False
    hover = node.check_failsafe(1.0, 10.0, False)
    assert hover is False
    assert node.state == MavState.BOOT


def test_hovering_vehicle_keeps_state(node):
    hover = node.check_failsafe(0.1, 10.0, True)
    assert hover is True
    assert node.state == MavState.BOOT


def test_healthy_data_sets_active(node):
    hover = node.check_failsafe(0.1, 10.0, False)
    assert hover is False
    assert node.state == MavState.ACTIVE