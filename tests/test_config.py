"""Tests for filebox.config: ServerConfig validation, defaults and log sinks."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from filebox.config import settings
from filebox.config.logging import configure_logging
from filebox.config.models import ServerConfig
from filebox.errors import ConfigurationError


@pytest.fixture
def filebox_logger() -> Iterator[logging.Logger]:
    loggers = [logging.getLogger(name) for name in ("filebox", "uvicorn")]
    saved = [(list(logger.handlers), logger.level) for logger in loggers]
    yield loggers[0]
    for logger, (handlers, level) in zip(loggers, saved):
        for handler in list(logger.handlers):
            if handler not in handlers:
                logger.removeHandler(handler)
                handler.close()
        logger.setLevel(level)


class TestServerConfig:
    def test_defaults(self) -> None:
        config = ServerConfig()
        assert config.host == "0.0.0.0"
        assert config.port == 8383
        assert config.trusted_root.is_absolute()
        assert config.trusted_root.name == "files"
        assert config.idle_timeout == 60
        config.validate()

    def test_missing_root_is_valid(self, tmp_path: Path) -> None:
        ServerConfig(trusted_root=tmp_path / "absent").validate()

    @pytest.mark.parametrize("port", [0, 65536, -1])
    def test_rejects_bad_port(self, port: int) -> None:
        with pytest.raises(ValueError, match="Port"):
            ServerConfig(port=port).validate()

    def test_rejects_relative_root(self) -> None:
        with pytest.raises(ValueError, match="absolute"):
            ServerConfig(trusted_root=Path("files")).validate()

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(ValueError, match="log level"):
            ServerConfig(log_level="LOUD").validate()

    def test_log_level_is_case_insensitive(self) -> None:
        ServerConfig(log_level="debug").validate()

    def test_rejects_non_positive_idle_timeout(self) -> None:
        with pytest.raises(ValueError, match="Idle timeout"):
            ServerConfig(idle_timeout=0).validate()


class TestSettings:
    def test_default_trusted_root_uses_working_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        assert settings.default_trusted_root() == tmp_path / settings.ROOT_DIRNAME

    def test_default_trusted_root_without_working_directory(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def missing_cwd() -> Path:
            raise FileNotFoundError("working directory was removed")

        monkeypatch.setattr(Path, "cwd", staticmethod(missing_cwd))
        with pytest.raises(ConfigurationError, match="working directory"):
            settings.default_trusted_root()

    def test_get_default_server_config(self, tmp_path: Path) -> None:
        config = settings.get_default_server_config(tmp_path)
        assert config.trusted_root == tmp_path
        assert config.host == settings.DEFAULT_HOST
        assert config.port == settings.default_port()

    def test_port_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "9123")
        assert settings.default_port() == 9123

    def test_unset_port_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PORT", raising=False)
        assert settings.default_port() == settings.DEFAULT_PORT == 8383

    def test_empty_port_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "")
        assert settings.default_port() == 8383

    def test_non_numeric_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "eighty")
        with pytest.raises(ConfigurationError, match="PORT"):
            settings.default_port()


class TestConfigureLogging:
    def test_stdout_sink(
        self, filebox_logger: logging.Logger, capsys: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging("INFO")
        logging.getLogger("filebox.server.app").info("Success! --> 200")
        assert "Success! --> 200" in capsys.readouterr().out

    def test_file_sink(self, filebox_logger: logging.Logger, tmp_path: Path) -> None:
        log_file = tmp_path / "filebox.log"
        configure_logging("INFO", log_file=log_file)
        logging.getLogger("filebox.server.app").error("ERROR --> 404")
        for handler in filebox_logger.handlers:
            handler.flush()
        assert "ERROR --> 404" in log_file.read_text()

    def test_quiet_attaches_no_sink(self, filebox_logger: logging.Logger) -> None:
        configure_logging("INFO", quiet=True)
        assert all(isinstance(h, logging.NullHandler) for h in filebox_logger.handlers)

    def test_reconfiguring_replaces_sink(self, filebox_logger: logging.Logger) -> None:
        configure_logging("INFO")
        configure_logging("DEBUG")
        sinks = [h for h in filebox_logger.handlers if not isinstance(h, logging.NullHandler)]
        assert len(sinks) == 1
        assert filebox_logger.level == logging.DEBUG

    def test_uvicorn_shares_sink(self, filebox_logger: logging.Logger, tmp_path: Path) -> None:
        log_file = tmp_path / "filebox.log"
        configure_logging("INFO", log_file=log_file)
        logging.getLogger("uvicorn.error").info("Started server process")
        for handler in logging.getLogger("uvicorn").handlers:
            handler.flush()
        assert "Started server process" in log_file.read_text()

    def test_quiet_silences_uvicorn(self, filebox_logger: logging.Logger) -> None:
        configure_logging("INFO", quiet=True)
        handlers = logging.getLogger("uvicorn").handlers
        assert handlers
        assert all(isinstance(h, logging.NullHandler) for h in handlers)
