"""
Carthage tasks
Runs the Carthage dependency manager for Xcode projects
Supports bootstrap, update and build with the Xcode 12 xcconfig workaround
"""

__version__ = "1.0.0"

from .main import CarthageTasks

__all__ = ["CarthageTasks", "__version__"]
