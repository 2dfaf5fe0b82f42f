"""
Carthage clean task
"""

import shutil

from ..constants import CARTHAGE_BUILD_DIR, CARTHAGE_DIR
from .base_task import CarthageTask


class CarthageCleanTask(CarthageTask):
    """Removes the Carthage build output and its derived data"""
    
    description = "Remove the Carthage build output"
    
    def only_if(self) -> bool:
        return True
    
    def execute(self) -> None:
        dry_run = getattr(self.command_runner, "dry_run", False)
        for directory in [self.root_dir / CARTHAGE_DIR / CARTHAGE_BUILD_DIR, self.derived_data_directory]:
            if directory.exists():
                self.logger.info(f"Removing {directory}")
                if not dry_run:
                    shutil.rmtree(directory)
            else:
                self.logger.debug(f"Nothing to remove at {directory}")
