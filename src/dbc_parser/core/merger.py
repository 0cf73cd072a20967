from __future__ import annotations

from typing import List, Mapping, Optional, Sequence

from .models import PLACEHOLDER_NODE, Message, Signal, classify_message_id


def merge_messages(
    names: Mapping[int, str],
    sizes: Mapping[int, int],
    transmitters: Mapping[int, str],
    default_cycle_time: Optional[int],
    explicit_cycle_times: Mapping[int, int],
    signals: Mapping[int, Sequence[Signal]],
) -> List[Message]:
    """Левое соединение всех проходов по ключам ``names``.

    Порядок сообщений совпадает с порядком первого появления заголовков.
    """
    fallback_cycle_time = default_cycle_time if default_cycle_time is not None else 0
    messages: List[Message] = []

    for message_id, message_name in names.items():
        messages.append(
            Message(
                message_name=message_name,
                message_id=classify_message_id(message_id),
                message_size=sizes.get(message_id, 0),
                cycle_time=explicit_cycle_times.get(message_id, fallback_cycle_time),
                transmitter=transmitters.get(message_id, PLACEHOLDER_NODE),
                signals=list(signals.get(message_id, [])),
            )
        )

    return messages
