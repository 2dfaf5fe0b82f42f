"""Xcode build configuration (xcconfig) files."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Union

from ..constants import (
    XCCONFIG_EXCLUDED_ARCHS_VALUE,
    XCCONFIG_SIMULATORS,
    XCCONFIG_WORKAROUND_XCODE_MAJOR,
)


class XCConfig:
    """Ordered ``KEY = VALUE`` settings bound to an xcconfig file path."""

    def __init__(self, file: Union[str, Path]):
        self.file = Path(file)
        self._entries: Dict[str, str] = {}

    @property
    def entries(self) -> Dict[str, str]:
        """Return a copy of the settings in insertion order."""
        return dict(self._entries)

    def set(self, key: str, value: str) -> None:
        """Set a value. Re-setting a key keeps its original position."""
        self._entries[key] = value

    def get(self, key: str) -> Optional[str]:
        return self._entries.get(key)

    def render(self) -> str:
        """Return the file contents, one ``KEY = VALUE`` line per entry."""
        return "".join(f"{key} = {value}\n" for key, value in self._entries.items())

    def create(self) -> Path:
        """Write the settings to :attr:`file`, replacing any existing file.

        Returns:
            The path that was written.
        """
        self.file.parent.mkdir(parents=True, exist_ok=True)
        self.file.write_text(self.render(), encoding="utf-8")
        return self.file

    def __repr__(self) -> str:
        return f"XCConfig(file={self.file}, entries={len(self._entries)})"


def build_xcode12_workaround(xcode_major: Optional[int],
                             file: Union[str, Path],
                             serialize_debugging: bool = False) -> Optional[XCConfig]:
    """Build the Xcode 12 architecture workaround without touching the disk.

    Xcode 12 adds arm64 to the simulator architectures, which breaks fat
    framework builds. The settings exclude the device architectures from the
    x86_64 simulator slices.

    Args:
        xcode_major: Major version of the active Xcode
        file: Path the config will be written to
        serialize_debugging: Also disable Swift debugging option serialization

    Returns:
        The config, or ``None`` for any Xcode other than 12.
    """
    if xcode_major != XCCONFIG_WORKAROUND_XCODE_MAJOR:
        return None

    xcconfig = XCConfig(file)
    for simulator in XCCONFIG_SIMULATORS:
        key = f"EXCLUDED_ARCHS__EFFECTIVE_PLATFORM_SUFFIX_{simulator}__NATIVE_ARCH_64_BIT_x86_64__XCODE_1200"
        xcconfig.set(key, XCCONFIG_EXCLUDED_ARCHS_VALUE)
    xcconfig.set(
        "EXCLUDED_ARCHS",
        "$(inherited) $(EXCLUDED_ARCHS__EFFECTIVE_PLATFORM_SUFFIX_$(PLATFORM_NAME)"
        "__NATIVE_ARCH_64_BIT_$(NATIVE_ARCH_64_BIT)__XCODE_$(XCODE_VERSION_MAJOR))",
    )
    if serialize_debugging:
        xcconfig.set("SWIFT_SERIALIZE_DEBUGGING_OPTIONS", "NO")
        xcconfig.set("OTHER_SWIFT_FLAGS", "$(inherited) -Xfrontend -no-serialize-debugging-options")
    return xcconfig
