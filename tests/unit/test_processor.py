import pytest
from pathlib import Path
from unittest.mock import patch

from dbc_parser.core.errors import InvalidDbcError
from dbc_parser.core.processor import DBCProcessor


class TestDBCProcessor:
    @pytest.fixture
    def mock_dbc_file(self, tmp_path):
        """Создание тестового DBC файла"""
        dbc_content = '''VERSION ""

BO_ 100 TestMessage: 8 Vector__XXX
 SG_ Signal1 : 0|8@1+ (1,0) [0|255] "" Vector__XXX
 SG_ Signal2 : 8|16@1+ (0.1,0) [0|6553.5] "V" Vector__XXX

BO_ 2566844926 J1939Message: 8 ECU
 SG_ Status : 0|8@1+ (1,0) [0|255] "" Vector__XXX

BO_ 4096 ExtendedPlain: 8 ECU
'''
        dbc_file = tmp_path / "test.dbc"
        dbc_file.write_text(dbc_content)
        return dbc_file

    @pytest.fixture
    async def processor(self, mock_dbc_file):
        processor = DBCProcessor(mock_dbc_file, metrics_enabled=False)
        await processor.initialize()
        yield processor
        await processor.close()

    async def test_initialize_success(self, mock_dbc_file):
        """Тест успешной инициализации"""
        processor = DBCProcessor(mock_dbc_file, metrics_enabled=False)
        assert processor.db is None

        await processor.initialize()

        assert processor.db is not None
        assert len(processor.messages) == 3

    async def test_initialize_missing_file(self):
        """Тест инициализации с отсутствующим файлом"""
        processor = DBCProcessor(Path("nonexistent.dbc"))

        with pytest.raises(FileNotFoundError):
            await processor.initialize()

    async def test_initialize_invalid_dbc(self, tmp_path):
        """Тест: файл без сообщений"""
        dbc_file = tmp_path / "empty.dbc"
        dbc_file.write_text('VERSION ""\n')
        processor = DBCProcessor(dbc_file, metrics_enabled=False)

        with patch('dbc_parser.core.processor.logger') as mock_logger:
            with pytest.raises(InvalidDbcError):
                await processor.initialize()
            mock_logger.error.assert_called_once()

        assert processor.db is None

    async def test_initialize_strict_and_lossy(self, tmp_path):
        """Тест строгого и мягкого декодирования файла"""
        dbc_file = tmp_path / "latin1.dbc"
        dbc_file.write_bytes(b'BO_ 1 M: 8 A\n SG_ T : 0|8@1+ (1,0) [0|255] "\xb0C" X\n')

        with pytest.raises(UnicodeDecodeError):
            await DBCProcessor(dbc_file, metrics_enabled=False).initialize()

        processor = DBCProcessor(dbc_file, lossy_utf8=True, metrics_enabled=False)
        await processor.initialize()
        assert processor.get_message_by_name("M").signals[0].unit == "\ufffdC"

    async def test_lookup_by_frame_id(self, processor):
        """Тест поиска по ID"""
        message = processor.get_message_by_frame_id(100)
        assert message.message_name == "TestMessage"
        assert message.transmitter_name == "No Transmitter"
        assert [s.name for s in message.signals] == ["Signal1", "Signal2"]

    async def test_lookup_extended(self, processor):
        """Тест поиска Extended сообщений по ID из файла и по raw()"""
        j1939 = processor.get_message_by_frame_id(2566844926)
        assert j1939.message_name == "J1939Message"

        plain = processor.get_message_by_frame_id(4096)
        assert plain.message_name == "ExtendedPlain"
        assert processor.get_message_by_frame_id(4096 | (1 << 31)) is plain

    async def test_raw_form_not_used_for_standard(self, processor):
        assert processor.get_message_by_frame_id(100 | (1 << 31)) is None

    async def test_lookup_unknown(self, processor):
        assert processor.get_message_by_frame_id(999) is None
        assert processor.get_message_by_name("Missing") is None

    async def test_lookup_by_name(self, processor):
        assert processor.get_message_by_name("J1939Message").is_extended is True

    async def test_lookup_without_initialization(self):
        """Тест запроса без инициализации"""
        processor = DBCProcessor(Path("test.dbc"))

        with pytest.raises(RuntimeError, match="DBC processor not initialized"):
            processor.get_message_by_frame_id(100)
        with pytest.raises(RuntimeError, match="DBC processor not initialized"):
            processor.messages

    async def test_close_clears_cache(self, mock_dbc_file):
        processor = DBCProcessor(mock_dbc_file, metrics_enabled=False)
        await processor.initialize()
        assert 100 in processor._message_cache

        await processor.close()

        assert processor._message_cache == {}
        assert processor.db is None

    async def test_reinitialize_drops_old_messages(self, mock_dbc_file):
        """Тест: повторная загрузка не оставляет сообщений прежнего файла"""
        processor = DBCProcessor(mock_dbc_file, metrics_enabled=False)
        await processor.initialize()
        assert processor.get_message_by_name("TestMessage") is not None

        mock_dbc_file.write_text('BO_ 300 Replacement: 8 ECU\n SG_ S : 0|8@1+ (1,0) [0|255] "" X\n')
        await processor.initialize()

        assert [m.message_name for m in processor.messages] == ["Replacement"]
        assert processor.get_message_by_frame_id(100) is None
        assert processor.get_message_by_name("TestMessage") is None
        assert processor.get_message_by_frame_id(300).message_name == "Replacement"

    async def test_failed_reinitialize_leaves_processor_empty(self, mock_dbc_file):
        processor = DBCProcessor(mock_dbc_file, metrics_enabled=False)
        await processor.initialize()

        mock_dbc_file.unlink()
        with pytest.raises(OSError):
            await processor.initialize()

        assert processor._message_cache == {}
        assert processor._message_names == {}
        with pytest.raises(RuntimeError, match="DBC processor not initialized"):
            processor.get_message_by_frame_id(100)
