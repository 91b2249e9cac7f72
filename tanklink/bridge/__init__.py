"""
Per-device session layer: settings, logging, background jobs and the bridge
that ties the synchronizer and dispatcher to a channel and capability store.
"""
from tanklink.bridge.config import BridgeSettings, get_settings
from tanklink.bridge.device import TankMonitorBridge
from tanklink.bridge.interfaces import CapabilityStore, Channel

__all__ = ["BridgeSettings", "CapabilityStore", "Channel", "TankMonitorBridge", "get_settings"]
