"""Contains the settings model for carthage tasks"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from ..constants import DEFAULT_DERIVED_DATA
from ..platform import PlatformType


class CarthageSettings(BaseModel):
    """Settings shared by every Carthage task of a project"""
    model_config = ConfigDict(extra="forbid")

    project_dir: Path
    """Directory Carthage runs in"""
    root_dir: Optional[Path] = None
    """Root project directory holding the Cartfile, defaults to project_dir"""
    derived_data_path: Optional[Path] = None
    """Xcode derived data root, defaults to <project_dir>/build/DerivedData"""
    type: Optional[str] = None
    """Target platform: iOS, macOS (or Mac), tvOS or watchOS. Anything else builds all"""
    cache: bool = False
    """Pass --cache-builds to Carthage"""
    archive: bool = False
    """Pass --archive to carthage build"""
    xcode_version: Optional[str] = None
    """Required Xcode version, selected through DEVELOPER_DIR"""
    serialize_debugging: bool = False
    """Disable Swift debugging option serialization in the Xcode 12 workaround"""

    @field_validator("xcode_version", mode="before")
    @classmethod
    def _version_to_string(cls, value):
        """YAML reads 12 or 12.0 as numbers"""
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @model_validator(mode="after")
    def _resolve_paths(self) -> "CarthageSettings":
        """Fill in defaults and anchor relative paths at project_dir"""
        self.project_dir = self.project_dir.resolve()
        if self.root_dir is None:
            self.root_dir = self.project_dir
        else:
            self.root_dir = (self.project_dir / self.root_dir).resolve()
        if self.derived_data_path is None:
            self.derived_data_path = self.project_dir / DEFAULT_DERIVED_DATA
        elif not self.derived_data_path.is_absolute():
            self.derived_data_path = self.project_dir / self.derived_data_path
        return self

    @property
    def platform_type(self) -> Optional[PlatformType]:
        return PlatformType.from_string(self.type)
