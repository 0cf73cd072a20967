import pytest
import structlog
from pathlib import Path

from dbc_parser.config import Settings, ParserConfig, LoggingConfig, MetricsConfig
from dbc_parser.core.parser import DbcParser

FIXTURES = Path(__file__).parent / "fixtures"

ENGINE_DATA_DBC = (
    'BO_ 100 EngineData: 8 ECU\n'
    ' SG_ RPM : 7|16@0+ (0.25,0) [0|16000] "rpm" Vector__XXX\n'
)


@pytest.fixture
def vehicle_dbc_path():
    return FIXTURES / "vehicle.dbc"


@pytest.fixture
def vehicle_dbc_text(vehicle_dbc_path):
    return vehicle_dbc_path.read_text(encoding="utf-8")


@pytest.fixture
def engine_data_text():
    return ENGINE_DATA_DBC


@pytest.fixture
def parser():
    return DbcParser(metrics_enabled=False)


@pytest.fixture
def test_settings(vehicle_dbc_path):
    return Settings(
        dbc_file=vehicle_dbc_path,
        parser=ParserConfig(lossy_utf8=False),
        logging=LoggingConfig(level="DEBUG", format="console"),
        metrics=MetricsConfig(enabled=False),
    )


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()
