"""
Utility modules for carthage tasks
"""

import sys
import logging
from typing import Optional

from .command_runner import CommandRunner, CommandRunnerError, ConsoleOutputAppender
from .xcconfig import XCConfig, build_xcode12_workaround


class ColoredFormatter(logging.Formatter):
    """Colored log formatter for terminal output"""
    
    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
        'SUCCESS': '\033[92m',  # Bright Green
        'RESET': '\033[0m'
    }
    
    def format(self, record):
        if getattr(record, 'raw', False):
            return record.getMessage()
        
        if sys.stdout.isatty():
            # Other handlers share the record
            record = logging.makeLogRecord(record.__dict__)
            color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
            reset = self.COLORS['RESET']
            
            record.levelname = f"{color}{record.levelname}{reset}"
            record.msg = f"{color}{record.msg}{reset}"
        
        return super().format(record)


class Logger:
    """Carthage tasks logger"""
    
    SUCCESS = 25  # Between INFO and WARNING
    
    def __init__(self, verbose: bool = False, log_file: Optional[str] = None):
        """
        Initialize logger
        
        Args:
            verbose: Enable verbose output
            log_file: Optional log file path
        """
        self.verbose = verbose
        
        logging.addLevelName(self.SUCCESS, "SUCCESS")
        
        self.logger = logging.getLogger("carthage_tasks")
        self.logger.setLevel(logging.DEBUG if verbose else logging.INFO)
        self.logger.propagate = False
        
        # Remove existing handlers
        self.logger.handlers.clear()
        
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        
        if verbose:
            fmt = "%(asctime)s [%(levelname)s] %(message)s"
        else:
            fmt = "[%(levelname)s] %(message)s"
        
        console_handler.setFormatter(ColoredFormatter(fmt, datefmt="%H:%M:%S"))
        self.logger.addHandler(console_handler)
        
        if log_file:
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            ))
            self.logger.addHandler(file_handler)
    
    def debug(self, msg: str):
        """Log debug message"""
        self.logger.debug(msg)
    
    def info(self, msg: str):
        """Log info message"""
        self.logger.info(msg)
    
    def warning(self, msg: str):
        """Log warning message"""
        self.logger.warning(msg)
    
    def error(self, msg: str):
        """Log error message"""
        self.logger.error(msg)
    
    def success(self, msg: str):
        """Log success message"""
        self.logger.log(self.SUCCESS, msg)
    
    def raw(self, msg: str):
        """Log raw message without formatting"""
        record = self.logger.makeRecord(
            self.logger.name, logging.INFO, "", 0, msg, (), None
        )
        record.raw = True
        self.logger.handle(record)


__all__ = [
    "Logger",
    "ColoredFormatter",
    "CommandRunner",
    "CommandRunnerError",
    "ConsoleOutputAppender",
    "XCConfig",
    "build_xcode12_workaround",
]
