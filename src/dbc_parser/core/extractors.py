"""Независимые проходы по тексту DBC.

Каждая функция - чистая функция от входного текста и возвращает словарь,
ключом которого служит числовой ID сообщения или пара (ID, имя сигнала).
Отсутствие ключа означает значение по умолчанию при слиянии.
"""
from __future__ import annotations

from typing import Dict, Optional, Tuple

from . import patterns

U32_MAX = 0xFFFFFFFF

SignalKey = Tuple[int, str]


def parse_u32(text: str) -> Optional[int]:
    value = int(text)
    if value > U32_MAX:
        return None
    return value


def extract_message_names(dbc_input: str) -> Dict[int, str]:
    names: Dict[int, str] = {}
    for match in patterns.MESSAGE_NAME.finditer(dbc_input):
        message_id = parse_u32(match.group(1))
        if message_id is not None:
            names[message_id] = match.group(2)
    return names


def extract_message_sizes(dbc_input: str) -> Dict[int, int]:
    sizes: Dict[int, int] = {}
    for match in patterns.MESSAGE_SIZE.finditer(dbc_input):
        message_id = parse_u32(match.group(1))
        if message_id is not None:
            sizes[message_id] = int(match.group(2))
    return sizes


def extract_message_transmitters(dbc_input: str) -> Dict[int, str]:
    transmitters: Dict[int, str] = {}
    for match in patterns.MESSAGE_TRANSMITTER.finditer(dbc_input):
        message_id = parse_u32(match.group(1))
        if message_id is not None:
            transmitters[message_id] = match.group(2)
    return transmitters


def extract_default_cycle_time(dbc_input: str) -> Optional[int]:
    """BA_DEF_DEF_ "GenMsgCycleTime" <n>; - первое вхождение"""
    match = patterns.DEFAULT_CYCLE_TIME.search(dbc_input)
    if match is None:
        return None
    return parse_u32(match.group(1))


def extract_explicit_cycle_times(dbc_input: str) -> Dict[int, int]:
    cycle_times: Dict[int, int] = {}
    for match in patterns.EXPLICIT_CYCLE_TIME.finditer(dbc_input):
        message_id = parse_u32(match.group(1))
        cycle_time = parse_u32(match.group(2))
        if message_id is not None and cycle_time is not None:
            cycle_times[message_id] = cycle_time
    return cycle_times


def extract_initial_values(dbc_input: str) -> Dict[SignalKey, float]:
    initial_values: Dict[SignalKey, float] = {}
    for match in patterns.INITIAL_VALUE.finditer(dbc_input):
        message_id = parse_u32(match.group(1))
        if message_id is None:
            continue
        try:
            value = float(match.group(3).strip())
        except ValueError:
            continue
        initial_values[(message_id, match.group(2))] = value
    return initial_values


def extract_value_descriptions(dbc_input: str) -> Dict[SignalKey, Dict[int, str]]:
    """VAL_ <id> <signal> <int> "<label>" ... ;

    Блок без единой пары значение/описание не попадает в результат.
    """
    descriptions: Dict[SignalKey, Dict[int, str]] = {}
    for match in patterns.VALUE_DESCRIPTION.finditer(dbc_input):
        message_id = parse_u32(match.group(1))
        if message_id is None:
            continue

        signal_values = {
            int(pair.group(1)): pair.group(2)
            for pair in patterns.VALUE_PAIR.finditer(match.group(3))
        }
        if signal_values:
            descriptions[(message_id, match.group(2))] = signal_values
    return descriptions
