# logger_utils.py - for logging messages and timing metrics

import os
import time
from datetime import datetime

from colorama import Fore, Style, init

init(autoreset=True)

# Directory where log files go unless a path is given
LOG_DIR = "logs"
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "lexicon.log")


class Log:
    """Lightweight logger: appends to a file and optionally echoes to the console."""

    COLORS = {
        "DEBUG": Style.DIM,
        "INFO": Fore.BLUE,
        "WARNING": Fore.YELLOW,
        "ERROR": Fore.RED,
    }

    def __init__(self, path: str = None, echo: bool = False, use_color: bool = True):
        self.path = path or DEFAULT_LOG_PATH
        self.echo = echo
        self.use_color = use_color

    def write(self, level: str, msg: str):
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

        if not self.echo:
            return
        if self.use_color and level in self.COLORS:
            print(f"{self.COLORS[level]}{line}")
        else:
            print(line)

    # Public logging methods
    def debug(self, msg: str):
        self.write("DEBUG", msg)

    def info(self, msg: str):
        self.write("INFO", msg)

    def warning(self, msg: str):
        self.write("WARNING", msg)

    def error(self, msg: str):
        self.write("ERROR", msg)

    def metric(self, tag, value, unit=""):
        """
        Record a metric (timing, counts...) as an INFO line.
        Example: load dictionary.csv done: 0.123s
        """
        self.write("INFO", f"{tag}: {value}{unit}")

    def time_block(self, label):
        """
        Measure a code block:
            with log.time_block("load"):
                do_some_work()
        Logs how long the block took and exposes it as `.elapsed`.
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used by Log.time_block."""

    def __init__(self, log, label):
        self.log = log
        self.label = label
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        if exc_type is None:
            self.log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
        else:
            self.log.metric(f"{self.label} failed after", round(self.elapsed, 3), "s")
