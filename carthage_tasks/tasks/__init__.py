"""
Carthage tasks for the supported actions
"""

from .base_task import CarthageTask
from .bootstrap_task import CarthageBootstrapTask
from .update_task import CarthageUpdateTask
from .build_task import CarthageBuildTask
from .clean_task import CarthageCleanTask
from .orchestrator import TaskOrchestrator

__all__ = [
    "CarthageTask",
    "CarthageBootstrapTask",
    "CarthageUpdateTask",
    "CarthageBuildTask",
    "CarthageCleanTask",
    "TaskOrchestrator",
]
