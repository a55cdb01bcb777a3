"""Configuration management for velo code generation."""

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".velo"


@dataclass
class VeloConfig:
    """Project-level settings for code actions and file generation.

    Attributes:
        default_velo_type: Velo type used by wrap actions when the document
            declares none.
        default_state_type: State type used by wrap actions when the
            document declares none.
        file_extension: Extension of generated source files.
        test_directory: Directory, relative to the target directory, that
            receives generated tests.
    """
    default_velo_type: str = "MyNotifier"
    default_state_type: str = "MyState"
    file_extension: str = ".dart"
    test_directory: str = "test"


def _setting(section: dict, key: str, default: str) -> str:
    """Read a string setting, treating a missing or null value as unset."""
    value = section.get(key)
    if value is None:
        return default
    return str(value)


def load_velo_config(root: Path | None = None) -> VeloConfig:
    """Load configuration from the .velo file in the project root.

    Args:
        root: Project root. If None, uses current directory.

    Returns:
        VeloConfig object with loaded or default values.

    Notes:
        If .velo doesn't exist or can't be parsed, returns default config.
        Expected YAML structure:

        ```yaml
        velo:
          default_velo_type: MyNotifier
          default_state_type: MyState
          file_extension: .dart
          test_directory: test
        ```
    """
    if root is None:
        root = Path.cwd()

    config_path = root / CONFIG_FILE_NAME

    if not config_path.exists():
        return VeloConfig()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            return VeloConfig()

        velo_config = data.get("velo", {})
        if not isinstance(velo_config, dict):
            return VeloConfig()

        defaults = VeloConfig()
        return VeloConfig(
            default_velo_type=_setting(velo_config, "default_velo_type", defaults.default_velo_type),
            default_state_type=_setting(velo_config, "default_state_type", defaults.default_state_type),
            file_extension=_setting(velo_config, "file_extension", defaults.file_extension),
            test_directory=_setting(velo_config, "test_directory", defaults.test_directory),
        )
    except (yaml.YAMLError, OSError, UnicodeDecodeError) as e:
        logger.warning(f"Ignoring unreadable config {config_path}: {e}")
        return VeloConfig()
