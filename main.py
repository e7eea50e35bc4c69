"""
Main entry point for the compare-rows command line tool.

This module handles:
- Command line argument parsing
- Logging configuration
- Exception handling
- Running the interactive compare session
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, List

from comparerows.errors import CompareRowsError
from comparerows.services.console import Console
from comparerows.services.settings import APP_NAME, SessionConfig
from comparerows.session import CompareSession
from comparerows import __version__


# =============================================================================
# Constants
# =============================================================================

LOGS_DIR = Path("logs")

COMMANDS = ('compare',)
HELP_ARGS = ('h', 'help', '-h', '--help')

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


# =============================================================================
# Logging Setup
# =============================================================================

class LogFormatter(logging.Formatter):
    """Custom log formatter with colors for console."""

    COLORS = {
        logging.INFO: '\033[32m',      # Green
        logging.WARNING: '\033[33m',   # Yellow
        logging.ERROR: '\033[31m',     # Red
        logging.CRITICAL: '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, use_colors: bool = True):
        super().__init__(
            fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        self.use_colors = use_colors and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)

        if self.use_colors:
            color = self.COLORS.get(record.levelno, '')
            return f"{color}{formatted}{self.RESET}"

        return formatted


def setup_logging(level: str = "WARNING", log_file: Optional[Path] = None) -> logging.Logger:
    """
    Configure application logging.

    Log records go to stderr so they never mix with results on stdout.

    Args:
        level: Log level string
        log_file: Optional file path for logging

    Returns:
        Root logger instance
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(LogFormatter(use_colors=True))
    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(
            log_file,
            encoding='utf-8'
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(LogFormatter(use_colors=False))
        root_logger.addHandler(file_handler)

    # Encoding detection is chatty at debug level
    logging.getLogger('chardet').setLevel(logging.WARNING)

    return root_logger


# =============================================================================
# Exception Handling
# =============================================================================

class ExceptionHandler:
    """
    Global exception handler for unhandled exceptions.

    Logs the traceback and shows a single error line to the user.
    """

    def __init__(self, logger: logging.Logger, console: Console):
        self.logger = logger
        self.console = console

    def handle_exception(
        self,
        exc_type: type,
        exc_value: BaseException,
        exc_tb
    ) -> None:
        """Handle an unhandled exception."""
        # Don't handle keyboard interrupt
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_tb)
            return

        self.logger.critical(
            "Unhandled exception",
            exc_info=(exc_type, exc_value, exc_tb)
        )
        self.console.error(f"Unexpected error: {exc_type.__name__}: {exc_value}")


# =============================================================================
# Command Line Parsing
# =============================================================================

def normalize_argv(args: List[str]) -> List[str]:
    """
    Make the compare command optional.

    'compare-rows a.txt b.txt' is treated as 'compare-rows compare a.txt b.txt'
    and any help flag maps to the help of the matching parser.
    """
    if not args:
        return ['compare']

    explicit_command = args[0] in COMMANDS
    if any(arg in HELP_ARGS for arg in args):
        return ['compare', '--help'] if explicit_command else ['--help']
    if explicit_command or args[0] == '--version':
        return list(args)
    return ['compare', *args]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its compare command."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Compare the rows of two text files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s file1.txt file2.txt           Compare two files
  %(prog)s compare -t -i a.csv b.csv     Trim rows and ignore case
  %(prog)s -c names.txt emails.txt       Match rows contained in each other
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'{APP_NAME} {__version__}'
    )

    subparsers = parser.add_subparsers(dest='command')
    compare = subparsers.add_parser(
        'compare',
        help='Default behavior. Compares two files.',
        description='Compares two files row by row.'
    )

    # Positional arguments, checked by the session for a clearer message
    compare.add_argument('file01', nargs='?', help='First file to compare')
    compare.add_argument('file02', nargs='?', help='Second file to compare')

    # Comparison options
    compare.add_argument(
        '-t', '--trim',
        action='store_true',
        help='Trims rows before comparing them'
    )
    compare.add_argument(
        '-i', '--ignorecase',
        action='store_true',
        help='Case insensitive'
    )
    compare.add_argument(
        '-c', '--contains',
        action='store_true',
        help='The compare is positive if the row contains the other'
    )
    compare.add_argument(
        '-e', '--encoding',
        default=None,
        help='Force the encoding used to read both files'
    )

    # Logging
    compare.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output'
    )
    compare.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug mode and write a log file'
    )
    compare.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        default='WARNING',
        help='Log level'
    )

    return parser


def parse_arguments(args: Optional[List[str]] = None) -> SessionConfig:
    """
    Parse command line arguments.

    Args:
        args: Arguments to parse (defaults to sys.argv)

    Returns:
        Configuration for the session
    """
    argv = normalize_argv(list(sys.argv[1:] if args is None else args))
    parsed = build_parser().parse_args(argv)

    if parsed.debug or parsed.verbose:
        log_level = 'DEBUG'
    else:
        log_level = parsed.log_level

    log_file = LOGS_DIR / f"{APP_NAME}_{datetime.now():%Y%m%d}.log" if parsed.debug else None

    return SessionConfig.from_args(
        parsed.file01,
        parsed.file02,
        trim=parsed.trim,
        ignorecase=parsed.ignorecase,
        contains=parsed.contains,
        encoding=parsed.encoding,
        log_level=log_level,
        log_file=log_file,
    )


# =============================================================================
# Main Function
# =============================================================================

def main(args: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    """
    Application main entry point.

    Returns:
        Exit code (0 for success)
    """
    config = parse_arguments(args)
    console = console or Console()

    logger = setup_logging(config.log_level, config.log_file)
    logger.info(f"Starting {config.app_name} v{config.version}")

    exception_handler = ExceptionHandler(logger, console)
    previous_hook = sys.excepthook
    sys.excepthook = exception_handler.handle_exception

    try:
        CompareSession(config, console=console).run()
    except CompareRowsError as e:
        logger.error(f"Session failed: {e}")
        console.error(str(e))
        return EXIT_ERROR
    except KeyboardInterrupt:
        console.blank()
        logger.info("Interrupted by user")
        return EXIT_INTERRUPTED
    finally:
        sys.excepthook = previous_hook

    return EXIT_OK


def run() -> None:
    sys.exit(main())


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == '__main__':
    run()
