"""
Decoded Current Cost message model.

A decoded message is either a ``ClassicMessage`` or an ``EnvyMessage``. Both share
the fields of ``Message``; the concrete class records which device generation
produced the fragment. Instances are frozen and every derived value (the channel
total and the history table) is computed once, when the instance is built.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional

from currentcost.core.numbers import to_float
from currentcost.parsing.history.decode import HistoryTable
from currentcost.parsing.message.classify import DeviceType
from currentcost.parsing.message.view import render_summary

CHANNELS: tuple[int, ...] = (1, 2, 3)


@dataclass(frozen=True)
class TimeOfDay:
    hour: int = 0
    minute: int = 0
    second: int = 0

    @property
    def seconds(self) -> int:
        return self.hour * 3600 + self.minute * 60 + self.second

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"


@dataclass(frozen=True)
class Channel:
    """
    One live power reading line.

    Attributes:
        unit_name: The reading's unit tag, e.g. ``"watts"``.
        raw_value: The value exactly as sent, e.g. ``"00345"``.
    """
    unit_name: str
    raw_value: str

    @property
    def value(self) -> Optional[float]:
        return to_float(self.raw_value)


@dataclass(frozen=True)
class Message:
    """
    Fields shared by both device generations.

    Attributes:
        message: The raw text the message was decoded from.
        device_name: Device model, e.g. ``"CC128"``.
        device_version: Firmware version, e.g. ``"v0.11"``.
        device_id: Classic device id from ``src``.
        sensor_type: Classic sensor type from ``src``.
        days_since_boot: Whole days since the monitor booted.
        time_of_day: Time reported by the monitor.
        temperature: Ambient temperature, if reported.
        sensor: Sensor number of a live reading.
        reading_id: Radio id of the sensor that produced the reading.
        reading_type: Sensor type of the reading.
        channels: Live readings keyed by channel number (1..3).
        history_present: Whether the message carried a history block.
        history_table: Reconstructed history; empty when there is none.
    """
    device_type: ClassVar[DeviceType]

    message: str
    device_name: str = ""
    device_version: str = ""
    device_id: Optional[str] = None
    sensor_type: Optional[int] = None
    days_since_boot: int = 0
    time_of_day: TimeOfDay = field(default_factory=TimeOfDay)
    temperature: Optional[float] = None
    sensor: Optional[int] = None
    reading_id: Optional[str] = None
    reading_type: Optional[int] = None
    channels: dict[int, Channel] = field(default_factory=dict)
    history_present: bool = False
    history_table: HistoryTable = field(default_factory=dict, repr=False)
    total: Optional[float] = field(init=False, default=None)

    def __post_init__(self) -> None:
        if self.units() is not None:
            total = 0.0
            for ch in CHANNELS:
                reading = self._reading(ch)
                total += (reading.value if reading else None) or 0.0
            object.__setattr__(self, "total", total)

    # --- identity ---
    @property
    def dsb(self) -> int:
        return self.days_since_boot

    @property
    def time(self) -> str:
        return str(self.time_of_day)

    def time_in_seconds(self) -> int:
        return self.time_of_day.seconds

    def boot_time_seconds(self) -> int:
        return self.days_since_boot * 86400 + self.time_in_seconds()

    boot_time = boot_time_seconds

    # --- readings ---
    def has_readings(self) -> bool:
        return bool(self.channels)

    def units(self) -> Optional[str]:
        """Unit of channel 1; ``None`` when the message has no channel 1 reading."""
        reading = self.channels.get(1)
        return reading.unit_name if reading else None

    def _reading(self, channel: int) -> Optional[Channel]:
        # Every channel is read under channel 1's unit; a channel reporting
        # another unit counts as absent.
        reading = self.channels.get(channel)
        if reading is None or reading.unit_name != self.units():
            return None
        return reading

    def value(self, channel: Optional[int] = None) -> Optional[float]:
        """
        Return a live reading.

        Args:
            channel: A channel number (1..3). When omitted, the sum of all
                channels is returned, absent channels counting as zero.

        Returns:
            The reading as a float, or ``None`` when the message has no
            readings or the requested channel is absent or reports
            a unit other than channel 1's.
        """
        if self.units() is None:
            return None
        if channel:
            reading = self._reading(channel)
            return reading.value if reading else None
        return self.total

    # --- history ---
    def has_history(self) -> bool:
        return self.history_present

    def history(self) -> HistoryTable:
        return {
            sensor: {span: dict(ages) for span, ages in record.items()}
            for sensor, record in self.history_table.items()
        }

    # --- projections ---
    def summary(self, prefix: str = "") -> str:
        return render_summary(self, prefix)

    def as_dict(self) -> dict[str, Any]:
        return {
            "device_type": self.device_type.value,
            "device_name": self.device_name,
            "device_version": self.device_version,
            "device_id": self.device_id,
            "sensor_type": self.sensor_type,
            "days_since_boot": self.days_since_boot,
            "time": self.time,
            "temperature": self.temperature,
            "sensor": self.sensor,
            "reading_id": self.reading_id,
            "reading_type": self.reading_type,
            "units": self.units(),
            "channels": {ch: reading.raw_value for ch, reading in self.channels.items()},
            "total": self.value(),
            "history": self.history(),
        }


@dataclass(frozen=True)
class ClassicMessage(Message):
    device_type: ClassVar[DeviceType] = DeviceType.CLASSIC


@dataclass(frozen=True)
class EnvyMessage(Message):
    device_type: ClassVar[DeviceType] = DeviceType.ENVY
