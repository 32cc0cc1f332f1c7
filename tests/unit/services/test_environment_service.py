"""Tests for the environment service."""

import os

import pytest

from provisioner.services.environment_service import EnvironmentService, append_path_entry
from provisioner.steps import EnvironmentChange
from tests.helpers import FakeUserEnvironment

SEP = os.pathsep


@pytest.fixture
def store():
    return FakeUserEnvironment({"PATH": f"/home/me/bin{SEP}/opt/tools"})


@pytest.fixture
def process_env():
    return {"PATH": "/usr/bin"}


@pytest.fixture
def service(process_env, store):
    return EnvironmentService(environ=process_env, user_store=store)


class TestAppendPathEntry:
    def test_appends_new_entry(self):
        assert append_path_entry(f"/a{SEP}/b", "/c") == f"/a{SEP}/b{SEP}/c"

    def test_existing_entry_is_left_alone(self):
        assert append_path_entry(f"/a{SEP}/b", "/b") == f"/a{SEP}/b"

    def test_trailing_separator_counts_as_same_entry(self):
        assert append_path_entry(f"/a{SEP}/b/", "/b") == f"/a{SEP}/b/"

    def test_empty_value(self):
        assert append_path_entry("", "/c") == "/c"


def test_in_process_change_does_not_persist(service, process_env, store):
    service.apply(EnvironmentChange.append_path("/opt/git/cmd"))

    assert process_env["PATH"] == f"/usr/bin{SEP}/opt/git/cmd"
    assert store.values["PATH"] == f"/home/me/bin{SEP}/opt/tools"


def test_persisted_change_updates_user_environment(service, process_env, store):
    service.apply(EnvironmentChange.append_path("/home/me/.cargo/bin", persist=True))

    assert process_env["PATH"].endswith("/home/me/.cargo/bin")
    assert store.values["PATH"] == f"/home/me/bin{SEP}/opt/tools{SEP}/home/me/.cargo/bin"


def test_persisting_twice_adds_entry_once(service, store):
    change = EnvironmentChange.append_path("/home/me/.cargo/bin", persist=True)

    service.apply(change)
    service.apply(change)

    assert store.values["PATH"].count("/home/me/.cargo/bin") == 1


def test_set_replaces_value(service, process_env):
    service.apply(EnvironmentChange("PSExecutionPolicyPreference", "Bypass"))

    assert process_env["PSExecutionPolicyPreference"] == "Bypass"


def test_persist_without_store_only_changes_process(process_env):
    service = EnvironmentService(environ=process_env)

    service.apply(EnvironmentChange.append_path("/opt/bin", persist=True))

    assert process_env["PATH"] == f"/usr/bin{SEP}/opt/bin"
