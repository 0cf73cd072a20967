from __future__ import annotations

from pathlib import Path
from typing import Dict

import structlog

from .models import Dbc, Message
from .parser import DbcParser

logger = structlog.get_logger(__name__)


class DBCProcessor:
    """Загружает DBC-файл и держит сообщения в кэше для быстрых запросов"""

    def __init__(self, dbc_file: Path, lossy_utf8: bool = False, metrics_enabled: bool = True) -> None:
        self.dbc_file = dbc_file
        self.lossy_utf8 = lossy_utf8
        self.db: Dbc | None = None
        self._parser = DbcParser(metrics_enabled=metrics_enabled)

        self._message_cache: Dict[int, Message] = {}
        self._message_names: Dict[str, Message] = {}

    async def initialize(self) -> None:
        """Чтение файла, парсинг и предварительное кэширование"""
        self._message_cache.clear()
        self._message_names.clear()
        self.db = None

        try:
            buffer = Path(self.dbc_file).read_bytes()
            if self.lossy_utf8:
                self.db = self._parser.parse_bytes_lossy(buffer)
            else:
                self.db = self._parser.parse_bytes(buffer)

            self._preload_all_messages()

            logger.info(
                "dbc_loaded",
                file=str(self.dbc_file),
                messages=len(self.db.messages),
                cached=len(self._message_cache),
            )
        except Exception as e:
            logger.error("dbc_load_failed", file=str(self.dbc_file), error=str(e))
            raise

    def _preload_all_messages(self) -> None:
        if self.db is None:
            return

        for message in self.db.messages:
            self._message_cache[message.message_id.value] = message
            self._message_names[message.message_name] = message

    @property
    def messages(self) -> list[Message]:
        return self._require_db().messages

    def get_message_by_frame_id(self, frame_id: int) -> Message | None:
        """Поиск по ID из файла; для Extended принимается и raw() с битом 31"""
        self._require_db()

        message = self._message_cache.get(frame_id)
        if message is None:
            message = self._message_cache.get(frame_id & ~(1 << 31))
            if message is not None and not message.is_extended:
                message = None
        if message is None:
            logger.debug("message_not_found", frame_id=frame_id)
        return message

    def get_message_by_name(self, name: str) -> Message | None:
        self._require_db()

        message = self._message_names.get(name)
        if message is None:
            logger.debug("message_not_found", name=name)
        return message

    def _require_db(self) -> Dbc:
        if self.db is None:
            raise RuntimeError("DBC processor not initialized")
        return self.db

    async def close(self) -> None:
        self._message_cache.clear()
        self._message_names.clear()
        self.db = None

        logger.info("dbc_processor_closed")
