from tanklink.bridge import BridgeSettings, CapabilityStore, Channel, TankMonitorBridge
from tanklink.datapoints import DataPointId, lookup_dp
from tanklink.dispatch import Route, UpdateDispatcher, route_for
from tanklink.parsing.commands import WriteCommand, encode_write
from tanklink.parsing.frame import RawFrame, parse_report
from tanklink.parsing.reports import decode
from tanklink.parsing.states import TankState, state_of
from tanklink.sync import SettingsSynchronizer, plan_writes
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "BridgeSettings",
    "CapabilityStore",
    "Channel",
    "DataPointId",
    "RawFrame",
    "Route",
    "SettingsSynchronizer",
    "TankMonitorBridge",
    "TankState",
    "UpdateDispatcher",
    "WriteCommand",
    "decode",
    "encode_write",
    "lookup_dp",
    "parse_report",
    "plan_writes",
    "route_for",
    "state_of",
]

try:
    __version__ = version("tanklink")
except PackageNotFoundError:
    __version__ = "0.0.0"
