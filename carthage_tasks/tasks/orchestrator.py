"""
Task orchestrator that maps actions to Carthage tasks
"""

from typing import Any, Dict, List, Optional, Type

from ..config.settings import CarthageSettings
from ..constants import ACTION_BOOTSTRAP, ACTION_BUILD, ACTION_CLEAN, ACTION_UPDATE
from ..platform import ExecutableLocator
from .base_task import CarthageTask
from .bootstrap_task import CarthageBootstrapTask
from .build_task import CarthageBuildTask
from .clean_task import CarthageCleanTask
from .update_task import CarthageUpdateTask


class TaskOrchestrator:
    """Creates and runs the task for an action"""
    
    TASK_MAP: Dict[str, Type[CarthageTask]] = {
        ACTION_BOOTSTRAP: CarthageBootstrapTask,
        ACTION_UPDATE: CarthageUpdateTask,
        ACTION_BUILD: CarthageBuildTask,
        ACTION_CLEAN: CarthageCleanTask,
    }
    
    def __init__(self,
                 settings: CarthageSettings,
                 command_runner: Any,
                 xcode: Any,
                 logger: Any,
                 locator: Optional[ExecutableLocator] = None):
        """
        Initialize task orchestrator
        
        Args:
            settings: Project settings
            command_runner: Command runner shared by all tasks
            xcode: Active Xcode
            logger: Logger instance
            locator: Finds the carthage executable
        """
        self.settings = settings
        self.command_runner = command_runner
        self.xcode = xcode
        self.logger = logger
        self.locator = locator or ExecutableLocator(logger=logger)
        
        if settings.type and settings.platform_type is None:
            self.logger.warning(f"Unknown platform {settings.type!r}, building all platforms")
    
    @classmethod
    def actions(cls) -> List[str]:
        return list(cls.TASK_MAP)
    
    def get_task(self, action: str) -> CarthageTask:
        """
        Get the task for an action
        
        Raises:
            ValueError: If the action is unknown
        """
        task_class = self.TASK_MAP.get(action)
        if task_class is None:
            raise ValueError(f"Unknown action: {action}. Available: {', '.join(self.actions())}")
        return task_class(
            settings=self.settings,
            command_runner=self.command_runner,
            xcode=self.xcode,
            logger=self.logger,
            locator=self.locator,
        )
    
    def run(self, action: str) -> bool:
        """
        Run the task for an action
        
        Returns:
            True if the task ran, False if it was skipped
        """
        task = self.get_task(action)
        if not task.only_if():
            self.logger.info(f"Skipping {action}: no Cartfile in {self.settings.project_dir}")
            return False
        
        self.logger.info(f"{task.description}...")
        task.execute()
        self.logger.success(f"Carthage {action} finished")
        return True
