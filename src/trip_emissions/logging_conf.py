import logging
import sys
import os
from typing import Optional

import colorama
from colorama import Fore, Style


class ColoredFormatter(logging.Formatter):
    """
    Formatter that colours console lines by level. WARNING and above keep a
    level prefix so they stay distinguishable without colour.
    """
    COLORS = {
        logging.DEBUG: Fore.BLUE,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.RED + Style.BRIGHT,
    }

    def __init__(self, fmt: str, use_color: bool = True):
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno >= logging.WARNING:
            message = f"{record.levelname}: {message}"
        if self.use_color:
            color = self.COLORS.get(record.levelno, "")
            message = f"{color}{message}{Style.RESET_ALL}"
        return message


def setup_logging(
    console_level: int = logging.INFO,
    file_path: Optional[str] = None,
    file_level: int = logging.DEBUG,
    no_color: bool = False
) -> logging.Logger:
    """
    Sets up the root logger with:
    - Console handler (colored by level)
    - Optional File handler (clean text, detailed format)
    """
    if os.environ.get("NO_COLOR"):
        no_color = True

    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)  # Capture all, handlers filter

    # Avoid duplicate handlers on repeated setup
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)

    is_tty = sys.stdout.isatty() if hasattr(sys.stdout, "isatty") else False
    use_color = is_tty and not no_color
    if use_color:
        colorama.init(autoreset=True)

    console_handler.setFormatter(ColoredFormatter("%(message)s", use_color=use_color))
    logger.addHandler(console_handler)

    if file_path:
        file_handler = logging.FileHandler(file_path, mode='w', encoding='utf-8')
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        logger.addHandler(file_handler)

    return logger
