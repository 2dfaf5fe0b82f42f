"""Subprocess execution with streamed console output"""

from __future__ import annotations

import os
import subprocess
from collections import deque
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union


class CommandRunnerError(subprocess.SubprocessError):
    """Raised when a command cannot be started or exits with a nonzero status"""

    def __init__(self, command: Sequence[str], returncode: Optional[int], output: str = ""):
        self.command = list(command)
        self.returncode = returncode
        self.output = output
        super().__init__(str(self))

    def __str__(self) -> str:
        cmd_str = " ".join(str(c) for c in self.command)
        if self.returncode is None:
            message = f"Command could not be started: {cmd_str}"
        else:
            message = f"Command failed with exit code {self.returncode}: {cmd_str}"
        if self.output:
            message += f"\n{self.output}"
        return message


class ConsoleOutputAppender:
    """Forwards subprocess output lines to the console logger"""

    def __init__(self, logger: Any):
        self.logger = logger

    def append(self, line: str) -> None:
        self.logger.raw(line)


class CommandRunner:
    """Runs external commands"""

    # Lines of output kept for error reports
    OUTPUT_TAIL = 50

    def __init__(self, logger: Any, dry_run: bool = False):
        """
        Initialize command runner

        Args:
            logger: Logger instance
            dry_run: If True, log commands instead of running them
        """
        self.logger = logger
        self.dry_run = dry_run

    def run(self,
            directory: Union[str, Path],
            args: List[str],
            environment: Optional[Dict[str, str]] = None,
            output_appender: Optional[ConsoleOutputAppender] = None) -> None:
        """
        Run a command and stream its output line by line

        Args:
            directory: Working directory
            args: Command and arguments
            environment: Variables added on top of the current environment
            output_appender: Receives each output line as it arrives

        Raises:
            CommandRunnerError: If the command cannot be started or fails
        """
        cmd_str = " ".join(str(c) for c in args)
        self.logger.debug(f"Running: {cmd_str}")
        self.logger.debug(f"  in: {directory}")

        if self.dry_run:
            self.logger.info(f"[DRY RUN] Would run: {cmd_str}")
            return

        env = os.environ.copy()
        if environment:
            env.update(environment)

        try:
            process = subprocess.Popen(
                [str(a) for a in args],
                cwd=str(directory),
                env=env,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding="utf-8",
                errors="replace",
                bufsize=1,
            )
        except OSError as e:
            raise CommandRunnerError(args, None, str(e)) from e

        tail: deque = deque(maxlen=self.OUTPUT_TAIL)
        with process:
            for line in process.stdout:
                line = line.rstrip("\r\n")
                tail.append(line)
                if output_appender is not None:
                    output_appender.append(line)
            returncode = process.wait()

        if returncode != 0:
            self.logger.error(f"Command failed: {cmd_str}")
            raise CommandRunnerError(args, returncode, "\n".join(tail))

    def run_with_result(self, *args: str, directory: Optional[Union[str, Path]] = None) -> str:
        """
        Run a command and return its stripped standard output

        Raises:
            CommandRunnerError: If the command cannot be started or fails
        """
        self.logger.debug(f"Running: {' '.join(args)}")
        try:
            result = subprocess.run(
                list(args),
                cwd=str(directory) if directory else None,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as e:
            raise CommandRunnerError(args, None, str(e)) from e

        if result.returncode != 0:
            raise CommandRunnerError(args, result.returncode, result.stderr.strip())
        return result.stdout.strip()
