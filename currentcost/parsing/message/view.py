from __future__ import annotations

from typing import TYPE_CHECKING, Any

from currentcost.core.numbers import format_number

if TYPE_CHECKING:
    from currentcost.parsing.message.model import Message


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float):
        return format_number(value)
    return str(value)


def render_summary(message: "Message", prefix: str = "") -> str:
    """
    Render a decoded message as an indented multi-line report.

    Phases without data are skipped. History is listed by sensor, then span
    name, then age, all sorted so identical messages render identically.
    """
    lines = [f"{prefix}Device: {message.device_name} {message.device_version}"]
    prefix += "  "

    units = message.units()
    if message.has_readings() and units is not None:
        lines.append(
            f"{prefix}Sensor: {_text(message.sensor)} [{_text(message.reading_id)},{_text(message.reading_type)}]"
        )
        lines.append(f"{prefix}Total: {format_number(message.value())} {units}")
        for phase in (1, 2, 3):
            value = message.value(phase)
            if value is None:
                continue
            lines.append(f"{prefix}Phase {phase}: {format_number(value)} {units}")

    if message.has_history():
        lines.append(f"{prefix}History")
        history = message.history()
        for sensor in sorted(history):
            lines.append(f"{prefix}  Sensor {sensor}")
            record = history[sensor]
            for span in sorted(record):
                for age in sorted(record[span]):
                    lines.append(f"{prefix}    -{age} {span}: {format_number(record[span][age])}")

    return "\n".join(lines) + "\n"
