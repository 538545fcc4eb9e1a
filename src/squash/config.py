# ABOUTME: Configuration from environment variables and XDG Base Directory paths
# ABOUTME: Provides output-mode defaults and the log directory for squash
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _env_flag(environ, name: str) -> bool:
    return environ.get(name, "").strip().lower() in _TRUTHY


class Config:
    """
    Runtime configuration for squash.

    Sources, in order of precedence: command-line options (applied by the CLI),
    environment variables (optionally loaded from a .env file), defaults.

    - ACCESSIBLE: start in accessible output mode
    - NO_COLOR: disable ANSI colour (any non-empty value)
    - SQUASH_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL (default WARNING)
    - State: $XDG_STATE_HOME/squash (default: ~/.local/state/squash)
    """

    def __init__(self, state_dir: str | None = None, environ=None):
        self.environ = os.environ if environ is None else environ

        if state_dir is None:
            xdg_state_home = self.environ.get(
                "XDG_STATE_HOME", os.path.expanduser("~/.local/state")
            )
            self.state_dir = Path(xdg_state_home) / "squash"
        else:
            self.state_dir = Path(state_dir)

        self.accessible = _env_flag(self.environ, "ACCESSIBLE")
        self.color = not self.environ.get("NO_COLOR")
        self.log_level = self._load_log_level()

    def _load_log_level(self) -> str:
        level = self.environ.get("SQUASH_LOG_LEVEL", "WARNING").strip().upper()
        if level not in _LOG_LEVELS:
            logger.warning(f"Ignoring invalid SQUASH_LOG_LEVEL {level!r}, using WARNING")
            return "WARNING"
        return level

    def get_log_dir(self) -> Path:
        """Get the log directory (XDG state), creating it if needed"""
        log_dir = self.state_dir / "logs"
        log_dir.mkdir(parents=True, exist_ok=True, mode=0o700)
        return log_dir
