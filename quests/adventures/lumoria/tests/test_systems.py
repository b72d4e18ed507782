"""Tests for the built-in star systems."""

import dataclasses

import pytest

from quests.adventures.lumoria.systems import ANDROMEDA, LUMORIA, SYSTEMS, get_system
from quests.validation import validate_bodies


def test_builtin_systems_registered():
    assert set(SYSTEMS) == {"lumoria", "andromeda"}
    assert SYSTEMS["lumoria"] is LUMORIA
    assert SYSTEMS["andromeda"] is ANDROMEDA


def test_get_system_case_insensitive():
    assert get_system("Lumoria") is LUMORIA
    assert get_system("  ANDROMEDA ") is ANDROMEDA
    assert get_system("nowhere") is None


def test_builtin_systems_are_valid():
    for system in SYSTEMS.values():
        assert validate_bodies(list(system.bodies)) == list(system.bodies)


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        SYSTEMS["extra"] = LUMORIA


def test_bodies_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        LUMORIA.bodies[0].distance = 9.9
    assert isinstance(LUMORIA.bodies, tuple)
