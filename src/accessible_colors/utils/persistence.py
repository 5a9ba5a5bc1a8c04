"""Settings stored as a single JSON document.

A missing file means "use the defaults". A file that exists but does not
parse or validate is reported with a hint and left untouched, so a typo in a
hand-edited file never gets silently replaced.
"""

import logging
from pathlib import Path
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from accessible_colors.exceptions import (
    ConfigFileInvalidError,
    ConfigurationError,
    wrap_pydantic_error,
)

logger = logging.getLogger(__name__)

SettingsT = TypeVar("SettingsT", bound=BaseModel)


class SettingsFile(Generic[SettingsT]):
    """
    A settings model bound to the JSON file it lives in.

    Example:
        ```python
        settings = SettingsFile(Path("config.json"), AppConfig)
        config = settings.read_or_default()
        settings.write(config.model_copy(update={"precision": 2}))
        ```
    """

    def __init__(self, path: Path, model_type: type[SettingsT]):
        self.path = Path(path)
        self.model_type = model_type

    def __repr__(self) -> str:
        return f"SettingsFile({str(self.path)!r}, {self.model_type.__name__})"

    def read(self) -> SettingsT:
        """
        Parse and validate the file.

        Raises:
            FileNotFoundError: If there is no file
            ConfigFileInvalidError: If the file is empty, not UTF-8 or not JSON
            ConfigValidationError: If a value is out of range
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ConfigFileInvalidError(str(self.path), f"not UTF-8 text ({e.reason})") from e

        if not text.strip():
            raise ConfigFileInvalidError(str(self.path), "File is empty")

        try:
            settings = self.model_type.model_validate_json(text)
        except ValidationError as e:
            logger.warning(f"Rejected {self.path}: {e.error_count()} problem(s)")
            raise wrap_pydantic_error(e, str(self.path)) from e

        logger.debug(f"Read {self.model_type.__name__} from {self.path}")
        return settings

    def read_or_default(self) -> SettingsT:
        """Like read(), but a missing file gives the model's defaults."""
        if not self.path.exists():
            logger.info(f"No settings at {self.path}, using defaults")
            return self.model_type()
        return self.read()

    def write(self, settings: SettingsT) -> None:
        """
        Replace the file with `settings`, creating its directory if needed.

        The JSON is written next to the target first and moved into place,
        so readers see either the old or the new file, never half of one.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        staging = self.path.with_name(f".{self.path.name}.partial")
        try:
            staging.write_text(settings.model_dump_json(indent=2) + "\n", encoding="utf-8")
            staging.replace(self.path)
        except OSError:
            staging.unlink(missing_ok=True)
            raise
        logger.debug(f"Wrote {self.model_type.__name__} to {self.path}")

    def problem(self) -> Optional[str]:
        """Describe why the file cannot be used, or None if it reads cleanly."""
        try:
            self.read()
        except FileNotFoundError:
            return f"File not found: {self.path}"
        except ConfigurationError as e:
            return e.user_message
        return None
