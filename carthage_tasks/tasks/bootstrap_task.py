"""
Carthage bootstrap task
"""

from ..constants import ACTION_BOOTSTRAP
from .base_task import CarthageTask


class CarthageBootstrapTask(CarthageTask):
    """Checks out and builds the dependencies pinned in Cartfile.resolved"""
    
    description = "Check out and build the Carthage project dependencies"
    
    def execute(self) -> None:
        self.run(ACTION_BOOTSTRAP)
