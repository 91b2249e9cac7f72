"""Tests for routing decoded reports to the capability store."""
import asyncio
import logging

import pytest

from conftest import FakeStore
from tanklink.datapoints import DataPointId
from tanklink.dispatch import (
    CAPABILITY_ROUTES,
    OBSERVATIONAL_ROUTES,
    ROUTES,
    Route,
    UpdateDispatcher,
    route_for,
)
from tanklink.parsing.frame import RawFrame
from tanklink.parsing.reports import NumericReport, StateReport, Unrecognized
from tanklink.parsing.states import TankState

LOGGER = "tanklink.dispatch"


def _u32(value: int) -> bytes:
    return value.to_bytes(4, "big")


def test_every_dp_has_exactly_one_route():
    assert set(ROUTES) == set(DataPointId)
    routes = [route_for(dp) for dp in DataPointId]
    assert Route.UNKNOWN not in routes
    assert len(set(routes)) == len(routes)


def test_routes_are_partitioned():
    assert set(CAPABILITY_ROUTES).isdisjoint(OBSERVATIONAL_ROUTES)
    assert set(CAPABILITY_ROUTES) | OBSERVATIONAL_ROUTES | {Route.UNKNOWN} == set(Route)


def test_route_for_unknown_dp():
    assert route_for(42) is Route.UNKNOWN


def test_liquid_level_writes_capability(store):
    dispatcher = UpdateDispatcher(store)
    written = asyncio.run(dispatcher.handle_frame(RawFrame(dp=2, payload=_u32(4321))))
    assert written is True
    assert store.writes == [("liquid_level", 4321)]


def test_liquid_level_fill_writes_capability(store):
    dispatcher = UpdateDispatcher(store)
    asyncio.run(dispatcher.dispatch(NumericReport(dp=DataPointId.LIQUID_LEVEL_FILL, value=73)))
    assert store.writes == [("liquid_level_fill", 73)]


def test_state_full_writes_capability(store):
    dispatcher = UpdateDispatcher(store)
    asyncio.run(dispatcher.handle_frame(RawFrame(dp=1, payload=b"\x02")))
    assert store.writes == [("tank_state", "full")]


def test_state_report_dispatch(store):
    dispatcher = UpdateDispatcher(store)
    asyncio.run(dispatcher.dispatch(StateReport(dp=DataPointId.LIQUID_LEVEL_STATE, state=TankState.LOW)))
    assert store.values == {"tank_state": "low"}


def test_unknown_state_logs_one_warning(store, caplog):
    dispatcher = UpdateDispatcher(store)
    with caplog.at_level(logging.DEBUG, logger=LOGGER):
        written = asyncio.run(dispatcher.handle_frame(RawFrame(dp=1, payload=b"\x05")))
    assert written is False
    assert store.writes == []
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert warnings[0].getMessage() == "report_rejected"


def test_truncated_level_logs_warning(store, caplog):
    dispatcher = UpdateDispatcher(store)
    with caplog.at_level(logging.WARNING, logger=LOGGER):
        asyncio.run(dispatcher.handle_frame(RawFrame(dp=2, payload=b"\x00\x01\x02")))
    assert store.writes == []
    assert [r.getMessage() for r in caplog.records] == ["report_rejected"]


def test_unknown_dp_is_silent(store, caplog):
    dispatcher = UpdateDispatcher(store)
    with caplog.at_level(logging.DEBUG, logger=LOGGER):
        written = asyncio.run(dispatcher.handle_frame(RawFrame(dp=101, payload=b"\x01\x02")))
    assert written is False
    assert store.writes == []
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


def test_unrecognized_report(store):
    assert asyncio.run(UpdateDispatcher(store).dispatch(Unrecognized(dp=55))) is False
    assert store.writes == []


@pytest.mark.parametrize(
    "dp",
    [DataPointId.DISTANCE_TO_TOP, DataPointId.DISTANCE_TO_BOTTOM, DataPointId.MIN_LEVEL, DataPointId.MAX_LEVEL],
)
def test_observational_dps_only_log(store, caplog, dp):
    dispatcher = UpdateDispatcher(store)
    with caplog.at_level(logging.INFO, logger=LOGGER):
        written = asyncio.run(dispatcher.handle_frame(RawFrame(dp=int(dp), payload=_u32(120))))
    assert written is False
    assert store.writes == []
    observed = [r for r in caplog.records if r.getMessage() == "dp_observed"]
    assert len(observed) == 1
    assert observed[0].details["value"] == 120


def test_observational_order_independent():
    top = RawFrame(dp=int(DataPointId.DISTANCE_TO_TOP), payload=_u32(30))
    bottom = RawFrame(dp=int(DataPointId.DISTANCE_TO_BOTTOM), payload=_u32(200))

    async def run(frames):
        store = FakeStore()
        dispatcher = UpdateDispatcher(store)
        for frame in frames:
            await dispatcher.handle_frame(frame)
        return store.writes

    assert asyncio.run(run([top, bottom])) == asyncio.run(run([bottom, top])) == []


def test_store_failure_is_logged_not_raised(caplog):
    store = FakeStore(fail={"liquid_level"})
    dispatcher = UpdateDispatcher(store)
    with caplog.at_level(logging.WARNING, logger=LOGGER):
        written = asyncio.run(dispatcher.handle_frame(RawFrame(dp=2, payload=_u32(10))))
    assert written is False
    assert [r.getMessage() for r in caplog.records] == ["capability_write_failed"]


def test_last_write_wins(store):
    dispatcher = UpdateDispatcher(store)

    async def run():
        await dispatcher.handle_frame(RawFrame(dp=1, payload=b"\x00"))
        await dispatcher.handle_frame(RawFrame(dp=1, payload=b"\x02"))

    asyncio.run(run())
    assert store.values == {"tank_state": "full"}
