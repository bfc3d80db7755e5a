import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from prstatus.core.errors import ConfigError

DEFAULT_REFRESH_INTERVAL = 60.0


@dataclass(frozen=True)
class PrStatusConfig:
    """In-memory representation of `config.toml`.

    Example config.toml:
      # Bots whose reviews are noise in the reviewer list
      ignored_reviewers = ["github-actions", "copilot-pull-request-reviewer"]

      # Seconds between automatic refreshes in `prstatus dash` (0 disables)
      refresh_interval = 120
    """

    ignored_reviewers: tuple[str, ...]
    refresh_interval: float

    @classmethod
    def default(cls) -> "PrStatusConfig":
        return cls(ignored_reviewers=(), refresh_interval=DEFAULT_REFRESH_INTERVAL)


def default_config_path() -> Path:
    """Location of the user config, honoring XDG_CONFIG_HOME."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "prstatus" / "config.toml"
    return Path.home() / ".config" / "prstatus" / "config.toml"


def load_config(cfg_path: Path) -> PrStatusConfig:
    """Load config.toml if present; otherwise return defaults.

    Raises:
        ConfigError: If the file is not valid TOML or a key has the wrong type
    """
    if not cfg_path.exists():
        return PrStatusConfig.default()

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {cfg_path}: {e}") from e

    ignored = data.get("ignored_reviewers", [])
    if not isinstance(ignored, list) or not all(isinstance(login, str) for login in ignored):
        raise ConfigError(f"{cfg_path}: 'ignored_reviewers' must be a list of strings")

    interval = data.get("refresh_interval", DEFAULT_REFRESH_INTERVAL)
    if isinstance(interval, bool) or not isinstance(interval, int | float) or interval < 0:
        raise ConfigError(f"{cfg_path}: 'refresh_interval' must be a non-negative number")

    return PrStatusConfig(ignored_reviewers=tuple(ignored), refresh_interval=float(interval))
