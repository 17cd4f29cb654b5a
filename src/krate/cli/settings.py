"""defaults remembered by the command line front end between runs."""
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ValidationError, field_validator

from ..domain.errors import KrateConfigError
from ..registry.http import build_user_agent

logger = logging.getLogger(__name__)


class CliSettings(BaseModel):
    user_agent: Optional[str] = None

    @field_validator("user_agent")
    @classmethod
    def check_user_agent(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        try:
            build_user_agent(value)
        except KrateConfigError as e:
            raise ValueError(str(e)) from e
        return value.strip()


class SettingsStore:
    """reads and writes CliSettings as json."""

    def __init__(self, settings_file: Path):
        self.settings_file = settings_file

    def load(self) -> CliSettings:
        """
        load the stored settings.

        a missing, unreadable or invalid file yields empty settings, so a
        damaged file never blocks a command that passes --user-agent.
        """
        if not self.settings_file.exists():
            return CliSettings()

        try:
            return CliSettings.model_validate_json(self.settings_file.read_text())
        except (OSError, ValidationError) as e:
            logger.warning(f"ignoring settings in {self.settings_file}: {e}")
            return CliSettings()

    def save(self, settings: CliSettings) -> None:
        try:
            self.settings_file.parent.mkdir(parents=True, exist_ok=True)
            self.settings_file.write_text(settings.model_dump_json(indent=2))
        except OSError as e:
            raise RuntimeError(f"failed to write settings file: {e}") from e

    def get_user_agent(self) -> Optional[str]:
        return self.load().user_agent

    def set_user_agent(self, user_agent: str) -> CliSettings:
        """
        validate and store the default identification.

        raises:
            KrateConfigError: if the identification could not be sent
            RuntimeError: if the file cannot be written
        """
        build_user_agent(user_agent)
        settings = CliSettings(**{**self.load().model_dump(), "user_agent": user_agent})
        self.save(settings)
        return settings
