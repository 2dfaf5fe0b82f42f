"""
Configuration management for carthage tasks
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from ..constants import CONFIG_FILE_NAME
from .settings import CarthageSettings


class ConfigError(ValueError):
    """Raised when the configuration file or overrides are invalid"""


class ConfigLoader:
    """Loads project settings from carthage.yaml and command line overrides"""
    
    def __init__(self, project_dir: Path, config_file: Optional[Path] = None):
        """
        Initialize configuration loader
        
        Args:
            project_dir: Project directory
            config_file: Configuration file, defaults to <project_dir>/carthage.yaml
        """
        self.project_dir = Path(project_dir)
        self.config_file = Path(config_file) if config_file else self.project_dir / CONFIG_FILE_NAME
    
    def read_file(self) -> Dict[str, Any]:
        """
        Read the configuration file
        
        Returns:
            File contents, empty if the file does not exist
        """
        if not self.config_file.exists():
            return {}
        
        try:
            with open(self.config_file, 'r') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid configuration file {self.config_file}: {e}") from e
        
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file {self.config_file} must contain a mapping")
        return data
    
    def load(self, **overrides: Any) -> CarthageSettings:
        """
        Load settings
        
        Args:
            **overrides: Values that replace file values, None means not given
            
        Returns:
            Validated settings
        """
        data = self.read_file()
        data.update({key: value for key, value in overrides.items() if value is not None})
        data["project_dir"] = self.project_dir
        
        try:
            return CarthageSettings.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e


__all__ = ["ConfigLoader", "ConfigError", "CarthageSettings"]
