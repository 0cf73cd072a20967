from .errors import InvalidDbcError
from .models import (
    ByteOrder,
    Dbc,
    ExtendedID,
    Message,
    MessageID,
    MultiplexerType,
    Signal,
    StandardID,
    ValueType,
    classify_message_id,
)
from .parser import DbcParser
from .processor import DBCProcessor

__all__ = [
    "ByteOrder",
    "Dbc",
    "DbcParser",
    "DBCProcessor",
    "ExtendedID",
    "InvalidDbcError",
    "Message",
    "MessageID",
    "MultiplexerType",
    "Signal",
    "StandardID",
    "ValueType",
    "classify_message_id",
]
