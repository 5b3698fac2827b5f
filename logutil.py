import os
import time
import threading
import multiprocessing
import config

LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")

LEVEL_COLORS = {
    "DEBUG": "\x1b[2m",
    "WARN": "\x1b[33m",
    "ERROR": "\x1b[31m",
}

# config switch that silences each scope; scopes not listed are always shown
SCOPE_SWITCHES = {
    "AREA": "LOG_GENERATION",
    "MAPGEN": "LOG_COLUMNS",
}


def enabled(scope, level="INFO"):
    threshold = getattr(config, "LOG_LEVEL", "INFO")
    if level in LEVELS and threshold in LEVELS and LEVELS.index(level) < LEVELS.index(threshold):
        return False
    if level in ("WARN", "ERROR"):
        return True
    switch = SCOPE_SWITCHES.get(scope)
    return switch is None or getattr(config, switch, True)


def elapsed_ms(start):
    """Milliseconds since `start`, a time.perf_counter() value."""
    return (time.perf_counter() - start) * 1000.0


def log(scope, msg, level="INFO"):
    if not enabled(scope, level):
        return
    where = f"pid{os.getpid()}"
    thread = threading.current_thread().name
    proc = multiprocessing.current_process().name
    if proc != "MainProcess":
        where += f" proc{proc}"
    if thread != "MainThread":
        where += f" thr{thread}"
    text = f"[{level} {where} {scope}] {msg}"
    color = LEVEL_COLORS.get(level)
    if color and getattr(config, "LOG_COLOR", True) and os.getenv("NO_COLOR") is None:
        text = f"{color}{text}\x1b[0m"
    print(text)
