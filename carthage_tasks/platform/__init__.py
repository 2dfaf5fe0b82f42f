"""
Platform naming and tool discovery
"""

import os
import shutil
from enum import Enum
from typing import Callable, Iterable, List, Optional

from ..constants import (
    CARTHAGE_PLATFORM_ALL,
    CARTHAGE_PLATFORM_IOS,
    CARTHAGE_PLATFORM_MACOS,
    CARTHAGE_PLATFORM_TVOS,
    CARTHAGE_PLATFORM_WATCHOS,
    CARTHAGE_TOOL,
    CARTHAGE_USR_BIN_DIR,
)
from .xcode import Version, Xcode, XcodeNotFoundError


class PlatformType(Enum):
    """Target platform of the Xcode project"""

    IOS = "iOS"
    MACOS = "macOS"
    TVOS = "tvOS"
    WATCHOS = "watchOS"

    @classmethod
    def from_string(cls, value: Optional[str]) -> Optional["PlatformType"]:
        """Look up a platform by name, ignoring case. Unknown names give None."""
        if not value:
            return None
        for member in cls:
            if member.value.lower() == value.lower():
                return member
        return _PLATFORM_ALIASES.get(value.lower())


# Carthage spells macOS as Mac
_PLATFORM_ALIASES = {
    "mac": PlatformType.MACOS,
}


_CARTHAGE_PLATFORM_NAMES = {
    PlatformType.IOS: CARTHAGE_PLATFORM_IOS,
    PlatformType.MACOS: CARTHAGE_PLATFORM_MACOS,
    PlatformType.TVOS: CARTHAGE_PLATFORM_TVOS,
    PlatformType.WATCHOS: CARTHAGE_PLATFORM_WATCHOS,
}


def carthage_platform_name(platform_type) -> str:
    """Return the name Carthage expects for ``--platform``, ``all`` if unknown"""
    return _CARTHAGE_PLATFORM_NAMES.get(platform_type, CARTHAGE_PLATFORM_ALL)


class ToolNotFoundError(RuntimeError):
    """Raised when an executable cannot be located"""


class ExecutableLocator:
    """Finds an executable on the search path, then in fixed fallback directories"""
    
    def __init__(self,
                 tool_name: str = CARTHAGE_TOOL,
                 search: Callable[[str], Optional[str]] = shutil.which,
                 exists: Callable[[str], bool] = os.path.exists,
                 fallback_dirs: Iterable[str] = (CARTHAGE_USR_BIN_DIR,),
                 logger=None):
        """
        Initialize executable locator
        
        Args:
            tool_name: Executable name
            search: Resolves a name on the search path, None when missing
            exists: Checks whether a fallback path exists
            fallback_dirs: Directories tried in order after the search path
            logger: Optional logger instance
        """
        self.tool_name = tool_name
        self.search = search
        self.exists = exists
        self.fallback_dirs = list(fallback_dirs)
        self.logger = logger
        self._path: Optional[str] = None
    
    def _from_search_path(self) -> Optional[str]:
        return self.search(self.tool_name)
    
    def _from_fallback(self, directory: str) -> Optional[str]:
        path = f"{directory.rstrip('/')}/{self.tool_name}"
        return path if self.exists(path) else None
    
    def strategies(self) -> List[Callable[[], Optional[str]]]:
        """Lookup strategies in the order they are tried"""
        fallbacks = [lambda d=d: self._from_fallback(d) for d in self.fallback_dirs]
        return [self._from_search_path] + fallbacks
    
    def locate(self) -> str:
        """
        Locate the executable
        
        Returns:
            Path of the first strategy that finds it
            
        Raises:
            ToolNotFoundError: If no strategy finds it
        """
        if self._path is not None:
            return self._path
        
        for strategy in self.strategies():
            path = strategy()
            if path:
                if self.logger:
                    self.logger.debug(f"Found {self.tool_name}: {path}")
                self._path = path
                return path
        
        raise ToolNotFoundError(
            f"The {self.tool_name} command was not found. "
            f"Make sure that {self.tool_name.capitalize()} is installed"
        )


__all__ = [
    "PlatformType",
    "carthage_platform_name",
    "ExecutableLocator",
    "ToolNotFoundError",
    "Version",
    "Xcode",
    "XcodeNotFoundError",
]
