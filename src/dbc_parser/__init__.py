from .core import (
    ByteOrder,
    Dbc,
    DbcParser,
    DBCProcessor,
    InvalidDbcError,
    Message,
    Signal,
    ValueType,
)

__version__ = "0.1.0"

__all__ = [
    "ByteOrder",
    "Dbc",
    "DbcParser",
    "DBCProcessor",
    "InvalidDbcError",
    "Message",
    "Signal",
    "ValueType",
]
