"""Tests for the tank state byte lookup."""
import pytest

from tanklink.parsing.states import TankState, state_of


def test_known_states():
    assert state_of(1) is TankState.LOW
    assert state_of(0) is TankState.NORMAL
    assert state_of(2) is TankState.FULL


@pytest.mark.parametrize("raw", [3, 4, 5, 0x7F, 0xFF])
def test_unknown_state_bytes(raw):
    assert state_of(raw) is None


def test_state_values_are_capability_strings():
    assert TankState.FULL == "full"
    assert {s.value for s in TankState} == {"low", "normal", "full"}
