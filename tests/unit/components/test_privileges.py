"""Tests for the privilege check and session environment."""

from provisioner.components.environment import SessionEnvironment
from provisioner.components.privileges import PrivilegeCheck
from tests.helpers import FakeSystem


def test_elevated_process_passes():
    assert PrivilegeCheck(FakeSystem(elevated=True)).check().success


def test_non_elevated_process_fails():
    result = PrivilegeCheck(FakeSystem(elevated=False)).check()

    assert not result.success
    assert "Administrator" in result.message


def test_non_windows_host_fails():
    system = FakeSystem()
    system.is_windows = lambda: False

    result = PrivilegeCheck(system).check()

    assert not result.success
    assert "Windows" in result.message


def test_session_sets_execution_policy():
    result = SessionEnvironment().prepare()

    [change] = result.environment
    assert change.variable == "PSExecutionPolicyPreference"
    assert change.value == "Bypass"
    assert not change.persist
