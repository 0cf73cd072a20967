from __future__ import annotations

from prometheus_client import Counter, Histogram

DBC_DOCUMENTS_PARSED = Counter("dbc_documents_parsed_total", "Total parsed DBC documents", ["status"])
DBC_MESSAGES_PARSED = Counter("dbc_messages_parsed_total", "Messages recovered from DBC documents")
DBC_SIGNALS_PARSED = Counter("dbc_signals_parsed_total", "Signals recovered from DBC documents")
DBC_PARSE_TIME = Histogram("dbc_parse_duration_seconds", "DBC document parse time")
