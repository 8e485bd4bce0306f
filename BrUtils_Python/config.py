import json
import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class TextSettings:
    remove_repeated_spaces: bool = True
    remove_accents: bool = True
    strict_accents: bool = False


@dataclass
class NumberSettings:
    decimal_places: int = 2
    binary_sizes: bool = False


@dataclass
class ClipboardSettings:
    command: str = ""


@dataclass
class BlobSettings:
    user_agent: str = "BrUtils/1.0"
    timeout_seconds: int = 30


@dataclass
class AppConfig:
    text: TextSettings
    numbers: NumberSettings
    clipboard: ClipboardSettings
    blob: BlobSettings

    @classmethod
    def default(cls) -> "AppConfig":
        return cls(
            text=TextSettings(),
            numbers=NumberSettings(),
            clipboard=ClipboardSettings(),
            blob=BlobSettings(),
        )

    @classmethod
    def load(cls, path: Optional[str] = None) -> "AppConfig":
        """Load configuration from JSON file."""
        config_path = path or os.path.join(os.getcwd(), "config.json")

        try:
            if os.path.exists(config_path):
                with open(config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)

                text = data.get("Text", {})
                numbers = data.get("Numbers", {})
                clipboard = data.get("Clipboard", {})
                blob = data.get("Blob", {})

                return cls(
                    text=TextSettings(
                        remove_repeated_spaces=text.get("RemoveRepeatedSpaces", True),
                        remove_accents=text.get("RemoveAccents", True),
                        strict_accents=text.get("StrictAccents", False),
                    ),
                    numbers=NumberSettings(
                        decimal_places=numbers.get("DecimalPlaces", 2),
                        binary_sizes=numbers.get("BinarySizes", False),
                    ),
                    clipboard=ClipboardSettings(
                        command=clipboard.get("Command", ""),
                    ),
                    blob=BlobSettings(
                        user_agent=blob.get("UserAgent", "BrUtils/1.0"),
                        timeout_seconds=blob.get("TimeoutSeconds", 30),
                    ),
                )
        except (OSError, ValueError, AttributeError):
            pass

        # Return default config if loading fails
        return cls.default()


# Global config instance
_current_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the current configuration instance."""
    global _current_config
    if _current_config is None:
        _current_config = AppConfig.load()
    return _current_config


def set_config(config: AppConfig) -> None:
    """Set the current configuration instance."""
    global _current_config
    _current_config = config
