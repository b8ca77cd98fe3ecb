import os
import sys
import datetime
import re
from typing import Any

from common.config import LOGS_DIR

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(project_root)


class Logger:
    """
    Logger for example runs, writing to text files and optionally printing to console.
    """

    def __init__(self, name: str, is_catalog: bool = False) -> None:
        logs_dir = os.path.join(project_root, LOGS_DIR)
        if not os.path.exists(logs_dir):
            os.makedirs(logs_dir)

        self.name = name
        self.is_catalog = is_catalog
        self.log_file = os.path.join(logs_dir, f"{name}.txt")

        with open(self.log_file, 'w') as f:
            timestamp = get_current_time_string()
            if is_catalog:
                f.write(f"[{timestamp}] CATALOG STARTED\n")
            else:
                f.write(f"[{timestamp}] {name} example started\n")

    def log(self, message: str, also_print: bool = False) -> None:
        """
        Log a message to the log file (and optionally print it to the console).
        :param message: Message to log.
        :param also_print: Whether to print the message to console as well.
        """
        timestamp = get_current_time_string()
        log_entry = f"[{timestamp}] {message}\n"

        with open(self.log_file, 'a') as f:
            f.write(log_entry)

        if also_print:
            print(f"[{timestamp}] {message}")


def emit(message: Any = "") -> None:
    """
    Print one line of example output. Strings and numbers are printed as-is, without timestamps.
    :param message: Text or number to print.
    """
    print(message)


def require_delegate(delegate: Any, role: str) -> Any:
    """
    Reject a missing delegate before a wrapper or context is built around it.
    :param delegate: The object that will receive forwarded calls.
    :param role: Name of the wrapper or method asking, used in the error message.
    :return: The delegate, unchanged.
    """
    if delegate is None:
        raise ValueError(f"{role} requires a delegate, got None")
    return delegate


def get_current_time_string() -> str:
    """
    Get the current time as a string formatted HH:MM:SS.
    :return: Current time string.
    """
    return datetime.datetime.now().strftime("%H:%M:%S")


def normalize_whitespace(s: str) -> str:
    """
    Normalize whitespace in a string: collapse multiple spaces into a single space and trim.

    :param s: Input string.
    :return: Cleaned-up string.
    """
    return re.sub(r'\s+', ' ', s.strip())
