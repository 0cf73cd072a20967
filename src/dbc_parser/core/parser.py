from __future__ import annotations

import time

import structlog

from ..utils.metrics import (
    DBC_DOCUMENTS_PARSED,
    DBC_MESSAGES_PARSED,
    DBC_PARSE_TIME,
    DBC_SIGNALS_PARSED,
)
from .errors import InvalidDbcError
from .extractors import (
    extract_default_cycle_time,
    extract_explicit_cycle_times,
    extract_initial_values,
    extract_message_names,
    extract_message_sizes,
    extract_message_transmitters,
    extract_value_descriptions,
)
from .merger import merge_messages
from .models import Dbc, Message
from .signals import SignalLookups, assemble_signals, count_signals

logger = structlog.get_logger(__name__)


class DbcParser:
    """Текст DBC -> Dbc. Состояния между вызовами не хранит."""

    def __init__(self, metrics_enabled: bool = True) -> None:
        self.metrics_enabled = metrics_enabled

    def parse(self, dbc_input: str) -> Dbc:
        started = time.perf_counter()
        logger.debug("parsing_dbc", length=len(dbc_input))

        messages = self._parse_messages(dbc_input)
        dbc = Dbc(messages=messages)

        if not messages:
            logger.warning("no_messages_found", length=len(dbc_input))
            self._record("invalid", dbc, started)
            raise InvalidDbcError(dbc, dbc_input)

        logger.debug("dbc_parsed", messages=len(dbc), signals=dbc.signal_count)
        self._record("ok", dbc, started)
        return dbc

    def parse_bytes(self, buffer: bytes) -> Dbc:
        """Строгий UTF-8: UnicodeDecodeError пробрасывается как есть"""
        return self.parse(buffer.decode("utf-8"))

    def parse_bytes_lossy(self, buffer: bytes) -> Dbc:
        """Невалидные последовательности заменяются на U+FFFD"""
        return self.parse(buffer.decode("utf-8", errors="replace"))

    def _parse_messages(self, dbc_input: str) -> list[Message]:
        names = extract_message_names(dbc_input)
        sizes = extract_message_sizes(dbc_input)
        transmitters = extract_message_transmitters(dbc_input)
        default_cycle_time = extract_default_cycle_time(dbc_input)
        explicit_cycle_times = extract_explicit_cycle_times(dbc_input)

        lookups = SignalLookups(
            value_descriptions=extract_value_descriptions(dbc_input),
            initial_values=extract_initial_values(dbc_input),
        )
        signals = assemble_signals(dbc_input, lookups)

        groups, total = count_signals(signals)
        logger.debug(
            "extraction_complete",
            names=len(names),
            sizes=len(sizes),
            transmitters=len(transmitters),
            default_cycle_time=default_cycle_time,
            explicit_cycle_times=len(explicit_cycle_times),
            value_descriptions=len(lookups.value_descriptions),
            initial_values=len(lookups.initial_values),
            signal_groups=groups,
            signals=total,
        )

        return merge_messages(
            names,
            sizes,
            transmitters,
            default_cycle_time,
            explicit_cycle_times,
            signals,
        )

    def _record(self, status: str, dbc: Dbc, started: float) -> None:
        if not self.metrics_enabled:
            return
        DBC_DOCUMENTS_PARSED.labels(status=status).inc()
        DBC_MESSAGES_PARSED.inc(len(dbc))
        DBC_SIGNALS_PARSED.inc(dbc.signal_count)
        DBC_PARSE_TIME.observe(time.perf_counter() - started)
