"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field

from accessible_colors.utils.persistence import SettingsFile

from .enums import ComplianceLevel

DEFAULT_CONFIG_PATH = Path.home() / ".accessible-colors" / "config.json"


class AppConfig(BaseModel):
    """Defaults used by the command line front end."""

    precision: int = Field(
        default=3, ge=0, le=10, description="Decimal places used when reporting contrast ratios"
    )
    default_level: ComplianceLevel = Field(
        default=ComplianceLevel.AA, description="Conformance level used when none is given"
    )
    large_text: bool = Field(
        default=False, description="Apply the relaxed large-text thresholds by default"
    )
    max_random_attempts: int = Field(
        default=1000,
        ge=1,
        description="How many random colors to draw before giving up on a compliant one",
    )

    @classmethod
    def settings_file(cls, path: Path | None = None) -> SettingsFile["AppConfig"]:
        """The file holding the configuration, ~/.accessible-colors/config.json by default."""
        return SettingsFile(DEFAULT_CONFIG_PATH if path is None else path, cls)

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load the configuration, or the defaults if there is no file yet.

        Raises:
            ConfigFileInvalidError: If the file is not valid JSON
            ConfigValidationError: If a value is out of range
        """
        return cls.settings_file(path).read_or_default()

    def save(self, path: Path | None = None) -> None:
        """Write the configuration, replacing any previous file."""
        self.settings_file(path).write(self)
