"""
Carthage build task
"""

from ..constants import ACTION_BUILD, ARGUMENT_ARCHIVE
from .base_task import CarthageTask


class CarthageBuildTask(CarthageTask):
    """Builds the checked out dependencies"""
    
    description = "Build the Carthage project dependencies"
    
    def execute(self) -> None:
        command = [ACTION_BUILD]
        if self.settings.archive:
            command.append(ARGUMENT_ARCHIVE)
        self.run(command)
