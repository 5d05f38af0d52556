"""Device Relay.

A small HTTP relay where devices post status messages and telemetry, and
operators queue trigger commands for devices to poll and acknowledge.
"""

__version__ = "0.1.0"

from device_relay.config import RelaySettings

__all__ = ["__version__", "RelaySettings"]
