"""Configuration management for Tally.

Reads configuration from ~/.config/tally.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass
import tomllib
import tomli_w

DEFAULT_PAGE_SIZE = 200
DEFAULT_CURRENCY = "USD"


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    db_data_dir: Path
    db_filename: str
    log_level: str
    log_dir: Path
    page_size: int = DEFAULT_PAGE_SIZE
    default_currency: str = DEFAULT_CURRENCY
    enable_reset: bool = False

    @property
    def db_path(self) -> Path:
        """Get the full database path (data_dir/filename)."""
        return self.db_data_dir / self.db_filename

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        base_dir = Path.home() / "data" / "tally"
        return cls(
            base_dir=base_dir,
            db_data_dir=base_dir / "db",
            db_filename="tally.db",
            log_level="INFO",
            log_dir=base_dir / "logs",
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "tally.toml"


def get_migrations_dir() -> Path:
    """Get the path to the migrations directory.

    This is always relative to the code location, not configurable.
    """
    return Path(__file__).parent / "db" / "migrations"


def get_seed_dir() -> Path:
    """Get the path to the bundled seed data directory."""
    return Path(__file__).parent / "db" / "seed"


def load_config() -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Returns:
        Config object with loaded or default values.
    """
    config_path = get_config_path()

    if not config_path.exists():
        config = Config.default()
        _write_config(config)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    # Parse with defaults for any missing values
    base_dir = Path(data.get("base_dir", Path.home() / "data" / "tally"))
    enable_reset = data.get("enable_reset", False)

    db_config = data.get("database", {})
    db_data_dir = Path(db_config.get("data_dir", base_dir / "db"))
    db_filename = db_config.get("filename", "tally.db")

    log_config = data.get("logging", {})
    log_level = log_config.get("level", "INFO")
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    dashboard_config = data.get("dashboard", {})
    page_size = int(dashboard_config.get("page_size", DEFAULT_PAGE_SIZE))
    default_currency = dashboard_config.get("default_currency", DEFAULT_CURRENCY)

    return Config(
        base_dir=base_dir,
        db_data_dir=db_data_dir,
        db_filename=db_filename,
        log_level=log_level,
        log_dir=log_dir,
        page_size=page_size,
        default_currency=default_currency,
        enable_reset=enable_reset,
    )


def _write_config(config: Config) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "base_dir": str(config.base_dir),
        "enable_reset": config.enable_reset,
        "database": {
            "data_dir": str(config.db_data_dir),
            "filename": config.db_filename,
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
        "dashboard": {
            "page_size": config.page_size,
            "default_currency": config.default_currency,
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
