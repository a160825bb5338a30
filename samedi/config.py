"""User configuration: defaults, validation, loading and saving."""

from __future__ import annotations

import dataclasses
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w

VALID_PROVIDERS = (
    "auto",
    "claude",
    "codex",
    "gemini",
    "llm",
    "stdin",
    "mock",
    "amazonq",
    "custom",
)
VALID_THEMES = ("dracula", "monokai", "gruvbox")
VALID_FIRST_DAYS = ("monday", "sunday")

# Providers whose command is not checked against an expected binary name.
_UNCHECKED_PROVIDERS = frozenset({"auto", "mock", "custom", "stdin"})
_EXPECTED_COMMANDS: dict[str, tuple[str, ...]] = {
    "claude": ("claude",),
    "codex": ("codex",),
    "gemini": ("gemini",),
    "llm": ("llm",),
    "amazonq": ("q",),
}

_TRUE_WORDS = frozenset({"1", "t", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "f", "false", "no", "off", ""})


class ConfigError(Exception):
    """Raised when configuration is invalid or cannot be read or written."""


def _home_dir() -> Path | None:
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


@dataclass
class UserConfig:
    email: str = ""
    username: str = ""
    timezone: str = "Local"


@dataclass
class LLMConfig:
    provider: str = "auto"
    cli_command: str = ""
    default_model: str = ""
    timeout_seconds: int = 300


@dataclass
class StorageConfig:
    data_dir: str = ""
    backup_enabled: bool = True
    backup_dir: str = ""
    auto_backup_days: int = 7


@dataclass
class SyncConfig:
    enabled: bool = False
    cloudflare_endpoint: str = ""
    sync_interval_minutes: int = 30


@dataclass
class TUIConfig:
    theme: str = "dracula"
    date_format: str = "2006-01-02"
    time_format: str = "15:04"
    first_day_of_week: str = "monday"


@dataclass
class LearningConfig:
    default_chunk_minutes: int = 60
    reminder_enabled: bool = True
    reminder_message: str = "What did you learn today?"
    streak_tracking: bool = True


_SECTIONS = ("user", "llm", "storage", "sync", "tui", "learning")


@dataclass
class Config:
    """All user configuration, grouped by section."""

    user: UserConfig = field(default_factory=UserConfig)
    llm: LLMConfig = field(default_factory=LLMConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    sync: SyncConfig = field(default_factory=SyncConfig)
    tui: TUIConfig = field(default_factory=TUIConfig)
    learning: LearningConfig = field(default_factory=LearningConfig)

    def validate(self) -> None:
        """Raise ConfigError if any setting is out of range or inconsistent."""
        if self.llm.provider not in VALID_PROVIDERS:
            raise ConfigError(
                f"invalid LLM provider: {self.llm.provider} "
                f"(must be one of: {', '.join(VALID_PROVIDERS)})"
            )

        self._validate_provider_command()

        timeout = self.llm.timeout_seconds
        if timeout < 10 or timeout > 600:
            raise ConfigError(
                f"LLM timeout must be between 10 and 600 seconds, got {timeout}"
            )

        if not self.storage.data_dir:
            raise ConfigError("storage data_dir cannot be empty")

        if self.tui.theme not in VALID_THEMES:
            raise ConfigError(
                f"invalid TUI theme: {self.tui.theme} "
                f"(must be one of: {', '.join(VALID_THEMES)})"
            )

        if self.tui.first_day_of_week not in VALID_FIRST_DAYS:
            raise ConfigError(
                f"invalid first_day_of_week: {self.tui.first_day_of_week} "
                "(must be monday or sunday)"
            )

    def _validate_provider_command(self) -> None:
        provider = self.llm.provider
        command = self.llm.cli_command
        if provider in _UNCHECKED_PROVIDERS or not command:
            return
        expected = _EXPECTED_COMMANDS.get(provider)
        if expected is not None and command not in expected:
            raise ConfigError(
                f"provider/command mismatch: provider '{provider}' expects command "
                f"'[{' '.join(expected)}]', but got '{command}'. Set cli_command to "
                "empty string to use default, or change provider to 'auto' for "
                "auto-detection"
            )

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """Return the configuration as nested plain dictionaries."""
        return dataclasses.asdict(self)

    def update_from_dict(self, data: dict[str, Any]) -> None:
        """Overlay values from nested dictionaries, ignoring unknown keys."""
        lowered = {str(k).lower(): v for k, v in data.items()}
        for section_name in _SECTIONS:
            values = lowered.get(section_name)
            if not isinstance(values, dict):
                continue
            section = getattr(self, section_name)
            values = {str(k).lower(): v for k, v in values.items()}
            for f in dataclasses.fields(section):
                if f.name in values:
                    setattr(section, f.name, _coerce(values[f.name], f.type, f.name))


def _coerce(value: Any, kind: Any, name: str) -> Any:
    if kind in (bool, "bool"):
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return value != 0
        if isinstance(value, str):
            word = value.strip().lower()
            if word in _TRUE_WORDS:
                return True
            if word in _FALSE_WORDS:
                return False
        raise ConfigError(f"failed to unmarshal config: cannot parse {name!r} as bool")
    if kind in (int, "int"):
        if isinstance(value, bool):
            return int(value)
        try:
            return int(value)
        except (TypeError, ValueError) as exc:
            raise ConfigError(
                f"failed to unmarshal config: cannot parse {name!r} as int"
            ) from exc
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def default_config() -> Config:
    """Return the default configuration."""
    home = _home_dir() or Path(".")
    return Config(
        user=UserConfig(email="", username=os.environ.get("USER", ""), timezone="Local"),
        llm=LLMConfig(),
        storage=StorageConfig(
            data_dir=str(home / ".samedi"),
            backup_enabled=True,
            backup_dir=str(home / "samedi-backups"),
            auto_backup_days=7,
        ),
        sync=SyncConfig(),
        tui=TUIConfig(),
        learning=LearningConfig(),
    )


def config_path() -> Path:
    """Return the default config file path."""
    home = _home_dir()
    if home is None:
        return Path(".samedi") / "config.toml"
    return home / ".samedi" / "config.toml"


def load() -> Config:
    """Read the config file, falling back to defaults when it does not exist."""
    cfg = default_config()
    if _home_dir() is None:
        raise ConfigError("failed to get home directory")

    path = config_path()
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        return cfg
    except OSError as exc:
        raise ConfigError(f"failed to read config file: {exc}") from exc

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(f"failed to read config file: {exc}") from exc

    cfg.update_from_dict(data)

    try:
        cfg.validate()
    except ConfigError as exc:
        raise ConfigError(f"invalid configuration: {exc}") from exc
    return cfg


def save(cfg: Config) -> None:
    """Validate and write the configuration to disk with owner-only permissions."""
    try:
        cfg.validate()
    except ConfigError as exc:
        raise ConfigError(f"invalid configuration: {exc}") from exc

    path = config_path()
    try:
        path.parent.mkdir(mode=0o755, parents=True, exist_ok=True)
    except OSError as exc:
        raise ConfigError(f"failed to create config directory: {exc}") from exc

    try:
        path.write_bytes(tomli_w.dumps(cfg.to_dict()).encode("utf-8"))
    except OSError as exc:
        raise ConfigError(f"failed to write config file: {exc}") from exc

    try:
        os.chmod(path, 0o600)
    except OSError as exc:
        raise ConfigError(f"failed to set config file permissions: {exc}") from exc


def init_config() -> None:
    """Create the default config file; fail if one already exists."""
    path = config_path()
    if path.exists():
        raise ConfigError(f"config file already exists at {path}")
    try:
        save(default_config())
    except ConfigError as exc:
        raise ConfigError(f"failed to initialize config: {exc}") from exc