"""Сборка сигналов по строкам DBC.

Единственное состояние прохода - ID текущего сообщения, который меняется
на каждой строке-заголовке ``BO_``. Переход по одной строке выполняет
чистая функция ``scan_line``; ``assemble_signals`` только накапливает
результаты переходов.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

import structlog

from . import patterns
from .extractors import SignalKey, parse_u32
from .models import ByteOrder, MultiplexerType, Signal, ValueType

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SignalLookups:
    value_descriptions: Mapping[SignalKey, Mapping[int, str]]
    initial_values: Mapping[SignalKey, float]


@dataclass(frozen=True)
class ScanStep:
    current_message_id: int
    opened_message_id: Optional[int] = None
    signal: Optional[Signal] = None


def classify_multiplexer(mux_info: str) -> MultiplexerType:
    if not mux_info:
        return MultiplexerType.PLAIN
    if mux_info == "M":
        return MultiplexerType.MULTIPLEXER
    if mux_info.startswith("m"):
        return MultiplexerType.MULTIPLEXED
    return MultiplexerType.PLAIN


def parse_receivers(receivers: str) -> List[str]:
    receivers = receivers.strip()
    if not receivers:
        return []
    return [receiver.strip() for receiver in receivers.split(",")]


def parse_signal_line(
    line: str, message_id: int, lookups: SignalLookups
) -> Optional[Signal]:
    match = patterns.SIGNAL.search(line)
    if match is None:
        return None

    try:
        start_bit = int(match["start_bit"])
        signal_size = int(match["size"])
        factor = float(match["factor"])
        offset = float(match["offset"])
        minimum = float(match["min"])
        maximum = float(match["max"])
    except ValueError as e:
        logger.debug("signal_line_skipped", message_id=message_id, line=line.strip(), error=str(e))
        return None

    name = match["name"]
    key = (message_id, name)

    return Signal(
        name=name,
        start_bit=start_bit,
        signal_size=signal_size,
        byte_order=ByteOrder.INTEL if match["order"] == "1" else ByteOrder.MOTOROLA,
        value_type=ValueType.UNSIGNED if match["sign"] == "+" else ValueType.SIGNED,
        factor=factor,
        offset=offset,
        min=minimum,
        max=maximum,
        unit=match["unit"],
        receivers=parse_receivers(match["receivers"]),
        value_descriptions=dict(lookups.value_descriptions.get(key, {})),
        multiplexer_type=classify_multiplexer(match["mux"]),
        initial_value=lookups.initial_values.get(key, 0.0),
    )


def scan_line(current_message_id: int, line: str, lookups: SignalLookups) -> ScanStep:
    """Один переход: сначала проверка заголовка BO_, затем строки SG_"""
    opened: Optional[int] = None

    header = patterns.MESSAGE_HEADER.search(line)
    if header is not None:
        header_id = parse_u32(header.group(1))
        if header_id is not None:
            current_message_id = opened = header_id

    signal = parse_signal_line(line, current_message_id, lookups)
    return ScanStep(current_message_id, opened, signal)


def assemble_signals(dbc_input: str, lookups: SignalLookups) -> Dict[int, List[Signal]]:
    signals: Dict[int, List[Signal]] = {}
    current_message_id = 0

    # разделитель строк - только \n, завершающий \r отбрасывается
    for line in dbc_input.split("\n"):
        line = line.removesuffix("\r")
        step = scan_line(current_message_id, line, lookups)
        current_message_id = step.current_message_id

        if step.opened_message_id is not None:
            signals.setdefault(step.opened_message_id, [])

        # строки SG_ до первого заголовка BO_ некуда привязать
        if step.signal is not None and current_message_id in signals:
            signals[current_message_id].append(step.signal)

    return signals


def count_signals(signals: Mapping[int, List[Signal]]) -> Tuple[int, int]:
    return len(signals), sum(len(group) for group in signals.values())
