"""
Xcode version detection and selection
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..constants import DEVELOPER_DIR, XCODE_APPLICATIONS_DIR, XCODE_BUNDLE_IDENTIFIER
from ..utils.command_runner import CommandRunnerError


class XcodeNotFoundError(RuntimeError):
    """Raised when the requested Xcode version is not installed"""


@dataclass(frozen=True)
class Version:
    """Xcode version as reported by ``xcodebuild -version``"""

    major: int
    minor: int = 0
    maintenance: int = 0
    text: str = ""

    @classmethod
    def parse(cls, value: str) -> "Version":
        """Parse ``12``, ``11.7`` or ``12.0.1``"""
        match = re.match(r"^\s*(\d+)(?:\.(\d+))?(?:\.(\d+))?", value)
        if not match:
            raise ValueError(f"Invalid Xcode version: {value!r}")
        major, minor, maintenance = (int(part) if part else 0 for part in match.groups())
        return cls(major, minor, maintenance, match.group(0).strip())

    def __str__(self) -> str:
        return self.text or f"{self.major}.{self.minor}.{self.maintenance}"


def parse_version_output(output: str) -> Tuple[Version, Optional[str]]:
    """
    Parse ``xcodebuild -version`` output
    
    Example::
    
        Xcode 12.0.1
        Build version 12A7300
    
    Returns:
        Version and build version (None if missing)
    """
    version = None
    build_version = None
    for line in output.splitlines():
        line = line.strip()
        if line.startswith("Xcode "):
            version = Version.parse(line[len("Xcode "):])
        elif line.startswith("Build version "):
            build_version = line[len("Build version "):].strip()
    if version is None:
        raise ValueError(f"No Xcode version in output: {output!r}")
    return version, build_version


class Xcode:
    """Active Xcode installation"""
    
    def __init__(self,
                 command_runner: Any,
                 logger: Any,
                 xcodebuild: str = "xcodebuild",
                 applications_dir: str = XCODE_APPLICATIONS_DIR):
        """
        Initialize Xcode
        
        Args:
            command_runner: Command runner used to query xcodebuild
            logger: Logger instance
            xcodebuild: xcodebuild executable of the active Xcode
            applications_dir: Searched for Xcode*.app when Spotlight finds nothing
        """
        self.command_runner = command_runner
        self.logger = logger
        self.xcodebuild = xcodebuild
        self.applications_dir = Path(applications_dir)
        self._version: Optional[Version] = None
        self._build_version: Optional[str] = None
    
    def _load(self):
        if self._version is None:
            output = self.command_runner.run_with_result(self.xcodebuild, "-version")
            self._version, self._build_version = parse_version_output(output)
            self.logger.debug(f"Xcode version: {self._version} ({self._build_version})")
    
    @property
    def version(self) -> Version:
        self._load()
        return self._version
    
    @property
    def build_version(self) -> Optional[str]:
        self._load()
        return self._build_version
    
    def get_installed_xcodes(self) -> List[Path]:
        """List installed Xcode application bundles"""
        try:
            output = self.command_runner.run_with_result(
                "mdfind", f"kMDItemCFBundleIdentifier={XCODE_BUNDLE_IDENTIFIER}"
            )
            apps = [Path(line.strip()) for line in output.splitlines() if line.strip()]
        except CommandRunnerError as e:
            self.logger.debug(f"mdfind failed: {e}")
            apps = []
        
        if not apps and self.applications_dir.exists():
            apps = sorted(self.applications_dir.glob("Xcode*.app"))
        return apps
    
    @staticmethod
    def matches(required: str, version: Version, build_version: Optional[str]) -> bool:
        """Check a required version string against a version or build version"""
        text = str(version)
        return text == required or text.startswith(required + ".") or build_version == required
    
    def get_xcode_select_environment_value(self, required: str) -> Dict[str, str]:
        """
        Get the environment that selects the required Xcode
        
        Args:
            required: Version (``12``, ``12.0.1``) or build version (``12A7300``)
            
        Returns:
            ``DEVELOPER_DIR`` pointing at the matching installation
            
        Raises:
            XcodeNotFoundError: If no installed Xcode matches
        """
        for app in self.get_installed_xcodes():
            developer_dir = app / "Contents" / "Developer"
            xcodebuild = developer_dir / "usr" / "bin" / "xcodebuild"
            try:
                output = self.command_runner.run_with_result(str(xcodebuild), "-version")
                version, build_version = parse_version_output(output)
            except (CommandRunnerError, ValueError) as e:
                self.logger.debug(f"Skipping {app}: {e}")
                continue
            
            if self.matches(required, version, build_version):
                self.logger.debug(f"Selected Xcode {version} at {app}")
                return {DEVELOPER_DIR: str(developer_dir)}
        
        raise XcodeNotFoundError(f"Xcode version {required} is not installed")
