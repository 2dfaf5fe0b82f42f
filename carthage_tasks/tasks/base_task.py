"""
Base task class that all Carthage tasks inherit from
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..config.settings import CarthageSettings
from ..constants import (
    ARGUMENT_CACHE_BUILDS,
    ARGUMENT_DERIVED_DATA,
    ARGUMENT_PLATFORM,
    CARTHAGE_BUILD_DIR,
    CARTHAGE_DERIVED_DATA_DIR,
    CARTHAGE_DIR,
    CARTHAGE_FILE,
    CARTHAGE_FILE_RESOLVED,
    XCODE_XCCONFIG_FILE,
    XCCONFIG_WORKAROUND_FILE,
)
from ..platform import ExecutableLocator, carthage_platform_name
from ..utils import ConsoleOutputAppender, XCConfig, build_xcode12_workaround


class CarthageTask(ABC):
    """Abstract base class for all Carthage tasks"""
    
    description = ""
    
    def __init__(self,
                 settings: CarthageSettings,
                 command_runner: Any,
                 xcode: Any,
                 logger: Any,
                 locator: Optional[ExecutableLocator] = None):
        """
        Initialize base task
        
        Args:
            settings: Project settings
            command_runner: Runs carthage
            xcode: Active Xcode, queried for its version and selection environment
            logger: Logger instance
            locator: Finds the carthage executable
        """
        self.settings = settings
        self.command_runner = command_runner
        self.xcode = xcode
        self.logger = logger
        self.locator = locator or ExecutableLocator(logger=logger)
    
    @property
    def root_dir(self) -> Path:
        return self.settings.root_dir
    
    @property
    def cartfile(self) -> Path:
        return self.root_dir / CARTHAGE_FILE
    
    @property
    def cartfile_resolved(self) -> Path:
        return self.root_dir / CARTHAGE_FILE_RESOLVED
    
    def has_cartfile(self) -> bool:
        return self.cartfile.exists()
    
    def has_cartfile_resolved(self) -> bool:
        return self.cartfile_resolved.exists()
    
    @property
    def carthage_platform_name(self) -> str:
        return carthage_platform_name(self.settings.platform_type)
    
    @property
    def output_directory(self) -> Path:
        """Directory Carthage writes the built frameworks to"""
        return self.root_dir / CARTHAGE_DIR / CARTHAGE_BUILD_DIR / self.carthage_platform_name
    
    @property
    def derived_data_directory(self) -> Path:
        return Path(self.settings.derived_data_path) / CARTHAGE_DERIVED_DATA_DIR
    
    @property
    def carthage_command(self) -> str:
        return self.locator.locate()
    
    def has_project_cartfile(self) -> bool:
        return (self.settings.project_dir / CARTHAGE_FILE).exists()
    
    def only_if(self) -> bool:
        """Whether the task has anything to do, decided by the project Cartfile"""
        return self.has_project_cartfile()
    
    def build_arguments(self, command: List[str], cache: bool) -> List[str]:
        """
        Assemble the carthage command line
        
        Args:
            command: Action followed by extra arguments
            cache: Add --cache-builds
            
        Returns:
            carthage <command...> --platform <name> [--cache-builds] --derived-data <path>
        """
        args = [self.carthage_command]
        args.extend(command)
        args.extend([ARGUMENT_PLATFORM, self.carthage_platform_name])
        if cache:
            args.append(ARGUMENT_CACHE_BUILDS)
        args.extend([ARGUMENT_DERIVED_DATA, str(self.derived_data_directory.absolute())])
        return args
    
    def run(self, command: Union[str, List[str]], cache: Optional[bool] = None) -> None:
        """
        Run carthage for the project
        
        Args:
            command: Action, or action followed by extra arguments
            cache: Add --cache-builds, defaults to the project setting
            
        Raises:
            ToolNotFoundError: If carthage is not installed
            CommandRunnerError: If carthage fails
        """
        if not self.has_cartfile():
            self.logger.debug("No Cartfile found, so we are done")
            return
        
        if isinstance(command, str):
            command = [command]
        if cache is None:
            cache = self.settings.cache
        
        self.logger.info(f"Update Carthage for platform {self.carthage_platform_name}")
        
        args = self.build_arguments(command, cache)
        self.logger.info(f"Carthage arguments {args}")
        environment = self.get_environment()
        self.logger.info(f"Carthage environment {environment}")
        
        self.command_runner.run(self.settings.project_dir,
                                args,
                                environment,
                                ConsoleOutputAppender(self.logger))
    
    def get_environment(self) -> Dict[str, str]:
        """Environment added to the carthage process"""
        environment: Dict[str, str] = {}
        xcconfig = self.create_xcconfig_if_needed()
        if xcconfig is not None:
            self.logger.info(f"Apply carthage workaround for Xcode 12: {xcconfig.entries}")
            environment[XCODE_XCCONFIG_FILE] = str(xcconfig.file.absolute())
        if self.settings.xcode_version is not None:
            environment.update(self.xcode.get_xcode_select_environment_value(self.settings.xcode_version))
        return environment
    
    def create_xcconfig_if_needed(self) -> Optional[XCConfig]:
        """Write the Xcode 12 workaround config when running under Xcode 12"""
        major = self.xcode.version.major
        self.logger.debug(f"createXCConfigIfNeeded: {major}")
        xcconfig = build_xcode12_workaround(
            major,
            self.root_dir / CARTHAGE_DIR / XCCONFIG_WORKAROUND_FILE,
            self.settings.serialize_debugging,
        )
        if xcconfig is None:
            return None
        xcconfig.create()
        self.logger.debug(f"xcconfig created: {xcconfig.file}")
        return xcconfig
    
    @abstractmethod
    def execute(self) -> None:
        """Run the task"""
        pass
