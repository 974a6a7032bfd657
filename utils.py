# --- utils.py ---

import time
import threading
from colorama import Fore, Style, init

init()

# Seconds to wait on a word list download
DEFAULT_TIMEOUT = 10

VERBOSE = False
start_time = None

# Lock used for synchronized printing across threads
PRINT_LOCK = threading.Lock()

def log_with_time(msg, color=Fore.LIGHTBLUE_EX):
    """Print ``msg`` with a timestamp relative to ``start_time``."""
    global start_time
    if start_time is None:
        start_time = time.time()
    elapsed = time.time() - start_time
    mins = int(elapsed // 60)
    secs = elapsed % 60
    timestamp = Style.DIM + f"[{mins:02}:{secs:06.3f}]" + Style.RESET_ALL
    with PRINT_LOCK:
        print(f"{timestamp} {color}{msg}{Style.RESET_ALL}", flush=True)

def vlog(msg, t0=None):
    if VERBOSE:
        if t0 is not None:
            elapsed = time.time() - t0
            log_with_time(f"{msg} (took {elapsed:.3f}s)")
        else:
            log_with_time(msg)

def log_error(msg):
    log_with_time(msg, color=Fore.RED)

def format_flag(value):
    """Render a predicate result as a coloured yes/no."""
    if value:
        return Fore.GREEN + "yes" + Style.RESET_ALL
    return Fore.RED + "no" + Style.RESET_ALL
