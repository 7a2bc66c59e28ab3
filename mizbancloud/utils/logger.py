"""
Centralized logging configuration with colored output
"""

import logging
import sys
from pathlib import Path
from typing import Optional
import colorlog


LOGS_DIR = Path("logs")


def setup_logger(
    name: str,
    level: str = "INFO",
    log_file: Optional[str] = None,
    console: bool = True
) -> logging.Logger:
    """
    Set up a logger with colored console output and optional file logging.
    
    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file name (saved in logs/ directory)
        console: Whether to output to console
        
    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))
    
    # Prevent duplicate handlers
    if logger.handlers:
        return logger
    
    # Console handler with colored output
    if console:
        console_handler = colorlog.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, level.upper()))
        
        console_formatter = colorlog.ColoredFormatter(
            "%(log_color)s%(levelname)-8s%(reset)s %(blue)s[%(name)s]%(reset)s %(message)s",
            datefmt=None,
            reset=True,
            log_colors={
                'DEBUG': 'cyan',
                'INFO': 'green',
                'WARNING': 'yellow',
                'ERROR': 'red',
                'CRITICAL': 'red,bg_white',
            },
            secondary_log_colors={},
            style='%'
        )
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)
    
    # File handler
    if log_file:
        LOGS_DIR.mkdir(exist_ok=True)
        file_path = LOGS_DIR / log_file
        file_handler = logging.FileHandler(file_path, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)  # Always log everything to file
        
        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)
    
    return logger


def get_logger(name: str, level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Get or create a logger with default configuration.
    
    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level
        log_file: Optional log file name
        
    Returns:
        Configured logger instance
    """
    return setup_logger(
        name=name,
        level=level,
        log_file=log_file,
        console=True
    )


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Apply a logging level (and optional log file) to every SDK logger.
    
    Module loggers keep their console handlers; the file handler is attached once
    to the package logger ("mizbancloud") and receives records by propagation.
    
    Args:
        level: Logging level
        log_file: Optional log file name (saved in logs/ directory)
    """
    numeric_level = getattr(logging, level.upper())
    
    for name, candidate in list(logging.Logger.manager.loggerDict.items()):
        if not isinstance(candidate, logging.Logger):
            continue
        if name != "mizbancloud" and not name.startswith("mizbancloud."):
            continue
        candidate.setLevel(numeric_level)
        for handler in candidate.handlers:
            if not isinstance(handler, logging.FileHandler):
                handler.setLevel(numeric_level)
    
    if log_file:
        package_logger = logging.getLogger("mizbancloud")
        package_logger.setLevel(numeric_level)
        LOGS_DIR.mkdir(exist_ok=True)
        file_path = (LOGS_DIR / log_file).resolve()
        for handler in package_logger.handlers:
            if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == file_path:
                return
        
        file_handler = logging.FileHandler(file_path, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        package_logger.addHandler(file_handler)
