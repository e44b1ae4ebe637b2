import logging

import pytest
from pydantic import ValidationError
from rich.logging import RichHandler

from graph_stepper.config import StepperConfig
from graph_stepper.logging_config import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.mark.unit
class TestStepperConfig:

    def test_defaults(self):
        cfg = StepperConfig()

        assert cfg.log_level == "INFO"
        assert cfg.default_interval_ms == 500
        assert (cfg.min_interval_ms, cfg.max_interval_ms, cfg.interval_step_ms) == (100, 2000, 100)

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("GRAPH_STEPPER_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("GRAPH_STEPPER_RICH_LOGGING", "false")
        monkeypatch.setenv("GRAPH_STEPPER_INTERVAL_MS", "800")

        cfg = StepperConfig.from_env()

        assert cfg.log_level == "DEBUG"
        assert cfg.use_rich_logging is False
        assert cfg.default_interval_ms == 800
        assert cfg.max_interval_ms == 2000

    @pytest.mark.parametrize("field", ["interval_step_ms", "min_interval_ms", "max_interval_ms", "default_interval_ms"])
    def test_interval_settings_must_be_positive(self, field):
        with pytest.raises(ValidationError):
            StepperConfig(**{field: 0})

    def test_zero_step_from_env_is_rejected(self, monkeypatch):
        """A zero slider increment would make every interval check divide by zero."""
        monkeypatch.setenv("GRAPH_STEPPER_INTERVAL_STEP_MS", "0")

        with pytest.raises(ValidationError):
            StepperConfig.from_env()


@pytest.mark.unit
class TestLoggingConfig:

    def test_setup_replaces_root_handlers(self, restore_root_logger):
        setup_logging(level="WARNING", use_rich=True)
        setup_logging(level="debug", use_rich=False)

        assert len(restore_root_logger.handlers) == 1
        assert restore_root_logger.level == logging.DEBUG

    def test_defaults_come_from_settings(self, restore_root_logger):
        handler = setup_logging(settings=StepperConfig(log_level="ERROR", use_rich_logging=False))

        assert not isinstance(handler, RichHandler)
        assert isinstance(handler, logging.StreamHandler)
        assert restore_root_logger.level == logging.ERROR
        assert restore_root_logger.handlers == [handler]

    def test_explicit_arguments_override_settings(self, restore_root_logger):
        handler = setup_logging(level="INFO", use_rich=True, settings=StepperConfig(log_level="ERROR", use_rich_logging=False))

        assert isinstance(handler, RichHandler)
        assert restore_root_logger.level == logging.INFO
