from pathlib import Path

from config import Config, parse_config


class TestParseConfig:
    """Tests for building Config from TOML data."""

    def test_defaults(self):
        config = parse_config({"base_dir": "/tmp/kakeibo"})

        assert config.base_dir == Path("/tmp/kakeibo")
        assert config.db_path == Path("/tmp/kakeibo/db/kakeibo.db")
        assert config.log_level == "INFO"
        assert config.log_dir == Path("/tmp/kakeibo/logs")
        assert config.keywords_path is None
        assert config.enable_reset is False

    def test_all_sections(self):
        config = parse_config(
            {
                "base_dir": "/data",
                "enable_reset": True,
                "database": {"data_dir": "/var/db", "filename": "test.db"},
                "logging": {"level": "DEBUG", "log_dir": "/var/log/kakeibo"},
                "classification": {"keywords_path": "/etc/kakeibo/keywords.yaml"},
            }
        )

        assert config.db_path == Path("/var/db/test.db")
        assert config.log_level == "DEBUG"
        assert config.log_dir == Path("/var/log/kakeibo")
        assert config.keywords_path == Path("/etc/kakeibo/keywords.yaml")
        assert config.enable_reset is True

    def test_default_config(self):
        config = Config.default()

        assert config.db_filename == "kakeibo.db"
        assert config.db_path.parent == config.base_dir / "db"
