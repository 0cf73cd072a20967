# src/dbc_parser/core/models.py
from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

NO_TRANSMITTER = "No Transmitter"
PLACEHOLDER_NODE = "Vector__XXX"
EXTENDED_ID_THRESHOLD = 0x800


class ByteOrder(str, Enum):
    INTEL = "Intel"
    MOTOROLA = "Motorola"


class ValueType(str, Enum):
    SIGNED = "Signed"
    UNSIGNED = "Unsigned"


class MultiplexerType(str, Enum):
    PLAIN = "Plain"
    MULTIPLEXER = "Multiplexer"
    MULTIPLEXED = "Multiplexed"


class StandardID(BaseModel):
    model_config = ConfigDict(frozen=True)

    variant: Literal["standard"] = "standard"
    value: int = Field(ge=0, le=0x7FF)      # 11 бит

    def raw(self) -> int:
        return self.value

    def kind(self) -> str:
        return "CAN Standard"


class ExtendedID(BaseModel):
    model_config = ConfigDict(frozen=True)

    variant: Literal["extended"] = "extended"
    value: int = Field(ge=0, le=0xFFFFFFFF)  # 29 бит + возможный IDE-бит из файла

    def raw(self) -> int:
        # бит 31 - маркер IDE
        return self.value | (1 << 31)

    def kind(self) -> str:
        return "CAN Extended"


MessageID = Annotated[Union[StandardID, ExtendedID], Field(discriminator="variant")]


def classify_message_id(frame_id: int) -> StandardID | ExtendedID:
    """Standard для ID < 0x800, иначе Extended"""
    if frame_id < EXTENDED_ID_THRESHOLD:
        return StandardID(value=frame_id & 0xFFFF)
    return ExtendedID(value=frame_id)


class Signal(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    start_bit: int = Field(ge=0)
    signal_size: int = Field(ge=0)
    byte_order: ByteOrder
    value_type: ValueType
    factor: float = 1.0
    offset: float = 0.0
    min: float = 0.0
    max: float = 0.0
    unit: str = ""
    receivers: list[str] = Field(default_factory=list)
    value_descriptions: dict[int, str] = Field(default_factory=dict)
    multiplexer_type: MultiplexerType = MultiplexerType.PLAIN
    initial_value: float = 0.0

    @property
    def is_signed(self) -> bool:
        return self.value_type is ValueType.SIGNED

    def vector_start_bit(self) -> int:
        """Стартовый бит в том виде, в котором его показывает Vector CANdb++.

        Intel-сигналы отображаются без изменений. Для Motorola сигнал,
        целиком лежащий в одном байте и начинающийся со старшего бита
        байта, показывается по исходному start_bit, остальные - по
        младшему (конечному) биту.
        """
        if self.byte_order is ByteOrder.INTEL:
            return self.start_bit

        # нулевая ширина: вычитание переполняется и насыщается до 0
        if self.signal_size == 0:
            end_bit = 0
        else:
            end_bit = max(self.start_bit - (self.signal_size - 1), 0)
        start_byte = self.start_bit // 8
        end_byte = end_bit // 8
        start_bit_in_byte = self.start_bit % 8

        if start_byte != end_byte or self.signal_size > 8:
            return end_bit
        if start_bit_in_byte == 7:
            return self.start_bit
        return end_bit

    def vector_initial_value(self) -> float:
        """Начальное значение в физических единицах: raw * factor + offset"""
        return self.initial_value * self.factor + self.offset


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    message_name: str
    message_id: MessageID
    message_size: int = Field(default=0, ge=0)
    cycle_time: int = Field(default=0, ge=0)
    transmitter: str = PLACEHOLDER_NODE
    signals: list[Signal] = Field(default_factory=list)

    @property
    def frame_id(self) -> int:
        return self.message_id.raw()

    @property
    def id_kind(self) -> str:
        return self.message_id.kind()

    def id_info(self) -> tuple[int, str]:
        return self.frame_id, self.id_kind

    @property
    def transmitter_name(self) -> str:
        if self.transmitter.startswith(PLACEHOLDER_NODE):
            return NO_TRANSMITTER
        return self.transmitter

    @property
    def is_extended(self) -> bool:
        return isinstance(self.message_id, ExtendedID)

    def get_signal(self, name: str) -> Signal | None:
        for signal in self.signals:
            if signal.name == name:
                return signal
        return None


class Dbc(BaseModel):
    model_config = ConfigDict(frozen=True)

    messages: list[Message] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.messages)

    @property
    def signal_count(self) -> int:
        return sum(len(message.signals) for message in self.messages)
