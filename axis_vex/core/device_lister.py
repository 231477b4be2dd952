"""Connected device list.

Talking to a V5 Brain needs a serial protocol this tool does not speak, so
the list always holds a single hint row.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DeviceRecord:
    label: str
    description: str


NO_DEVICES = DeviceRecord(label="No devices connected", description="Connect a VEX V5 Brain")


def list_devices() -> list[DeviceRecord]:
    return [NO_DEVICES]
