#!/usr/bin/env python3
"""
Main entry point for carthage tasks
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from .config import ConfigLoader
from .platform import ExecutableLocator, ToolNotFoundError, Xcode
from .tasks import TaskOrchestrator
from .utils import CommandRunner, Logger


class CarthageTasks:
    """Runs Carthage actions for one project"""
    
    def __init__(self,
                 project_dir: Optional[Path] = None,
                 verbose: bool = False,
                 dry_run: bool = False,
                 log_file: Optional[str] = None,
                 **overrides):
        """
        Initialize carthage tasks
        
        Args:
            project_dir: Project directory, defaults to the current directory
            verbose: Enable verbose output
            dry_run: Log the carthage command instead of running it
            log_file: Optional log file path
            **overrides: Settings that replace values from carthage.yaml
        """
        self.project_dir = Path(project_dir or Path.cwd())
        self.verbose = verbose
        
        self.logger = Logger(verbose=verbose, log_file=log_file)
        self.settings = ConfigLoader(self.project_dir).load(**overrides)
        self.command_runner = CommandRunner(self.logger, dry_run=dry_run)
        self.xcode = Xcode(self.command_runner, self.logger)
        self.locator = ExecutableLocator(logger=self.logger)
        
        self.orchestrator = TaskOrchestrator(
            settings=self.settings,
            command_runner=self.command_runner,
            xcode=self.xcode,
            logger=self.logger,
            locator=self.locator,
        )
    
    def bootstrap(self) -> bool:
        return self.orchestrator.run("bootstrap")
    
    def update(self) -> bool:
        return self.orchestrator.run("update")
    
    def build(self) -> bool:
        return self.orchestrator.run("build")
    
    def clean(self) -> bool:
        return self.orchestrator.run("clean")
    
    def show_info(self) -> None:
        """Show project information"""
        from . import __version__
        
        task = self.orchestrator.get_task("build")
        try:
            carthage = task.carthage_command
        except ToolNotFoundError:
            carthage = "[X] Not found"
        
        def status(present: bool) -> str:
            return "[OK] Found" if present else "[X] Missing"
        
        print(f"\nCarthage Tasks v{__version__}")
        print(f"{'='*50}")
        print(f"Project Directory: {self.settings.project_dir}")
        print(f"Root Directory: {self.settings.root_dir}")
        print(f"Carthage: {carthage}")
        print(f"Platform: {task.carthage_platform_name}")
        print(f"Cache builds: {self.settings.cache}")
        print(f"Derived Data: {task.derived_data_directory}")
        print(f"Output Directory: {task.output_directory}")
        print(f"\nManifests:")
        print(f"  - {'Cartfile':20} {status(task.has_cartfile())}")
        print(f"  - {'Cartfile.resolved':20} {status(task.has_cartfile_resolved())}")
        if self.settings.xcode_version:
            print(f"\nRequired Xcode: {self.settings.xcode_version}")


def main():
    """Command-line interface"""
    parser = argparse.ArgumentParser(
        description="Carthage Tasks - run Carthage for an Xcode project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s bootstrap                      # Check out and build dependencies
  %(prog)s update --platform iOS --cache  # Update iOS dependencies with build cache
  %(prog)s build --archive                # Build and archive frameworks
  %(prog)s clean                          # Remove Carthage build output
  %(prog)s info                           # Show project information
        """
    )
    
    parser.add_argument(
        "command",
        choices=TaskOrchestrator.actions() + ["info"],
        help="Command to execute"
    )
    
    parser.add_argument(
        "--project-dir",
        type=Path,
        help="Project directory (default: current directory)"
    )
    
    parser.add_argument(
        "--root-dir",
        type=Path,
        help="Root project directory holding the Cartfile (default: project directory)"
    )
    
    parser.add_argument(
        "--derived-data",
        type=Path,
        dest="derived_data_path",
        help="Derived data root (default: build/DerivedData)"
    )
    
    parser.add_argument(
        "--platform",
        dest="type",
        help="Target platform: iOS, macOS (or Mac), tvOS or watchOS (default: all)"
    )
    
    parser.add_argument(
        "--cache",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Pass --cache-builds to Carthage"
    )
    
    parser.add_argument(
        "--archive",
        action="store_true",
        default=None,
        help="Archive the built frameworks (build command)"
    )
    
    parser.add_argument(
        "--xcode-version",
        help="Required Xcode version or build version"
    )
    
    parser.add_argument(
        "--serialize-debugging",
        action="store_true",
        default=None,
        help="Disable Swift debugging option serialization under Xcode 12"
    )
    
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )
    
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the carthage command without running it"
    )
    
    parser.add_argument(
        "--log-file",
        help="Also write the log to this file"
    )
    
    args = parser.parse_args()
    
    try:
        ct = CarthageTasks(
            project_dir=args.project_dir,
            verbose=args.verbose,
            dry_run=args.dry_run,
            log_file=args.log_file,
            root_dir=args.root_dir,
            derived_data_path=args.derived_data_path,
            type=args.type,
            cache=args.cache,
            archive=args.archive,
            xcode_version=args.xcode_version,
            serialize_debugging=args.serialize_debugging,
        )
    except Exception as e:
        print(f"Error initializing carthage tasks: {e}", file=sys.stderr)
        sys.exit(1)
    
    try:
        if args.command == "info":
            ct.show_info()
        else:
            getattr(ct, args.command)()
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        ct.logger.error(f"Carthage {args.command} failed: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
