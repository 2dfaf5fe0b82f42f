"""
Carthage update task
"""

from ..constants import ACTION_UPDATE
from .base_task import CarthageTask


class CarthageUpdateTask(CarthageTask):
    """Resolves the Cartfile again, then checks out and builds the dependencies"""
    
    description = "Update and rebuild the Carthage project dependencies"
    
    def execute(self) -> None:
        self.run(ACTION_UPDATE)
