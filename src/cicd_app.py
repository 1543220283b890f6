#!/usr/bin/env python3
"""
Demo application for exercising a CI/CD pipeline.

Prints a greeting and a couple of platform facts, then walks through a few
one-second "processing steps" before reporting success. A SIGINT during a
step pause is reported on stderr and the run carries on; a SIGINT between
pauses is ignored.
"""

import platform
import signal
import sys
import threading
import time

STEPS = 5
STEP_DELAY = 1.0

_pausing = False


def _on_sigint(signum, frame):
    global _pausing
    if _pausing:
        _pausing = False
        raise KeyboardInterrupt


def platform_info() -> dict:
    return {
        "python": platform.python_version(),
        "os": platform.system(),
    }


def pause(seconds: float) -> bool:
    """Sleep for `seconds`; returns False if the sleep was interrupted."""
    global _pausing
    try:
        _pausing = True
        time.sleep(seconds)
    except (KeyboardInterrupt, InterruptedError) as e:
        _pausing = False
        print(f"Interrupted: {str(e) or 'sleep interrupted'}", file=sys.stderr, flush=True)
        return False
    finally:
        _pausing = False
    return True


def _steps() -> None:
    print("Hello, CICD World!", flush=True)
    print("This is a test Python application.", flush=True)

    info = platform_info()
    print(f"Python Version: {info['python']}", flush=True)
    print(f"OS Name: {info['os']}", flush=True)

    for step in range(1, STEPS + 1):
        print(f"Processing step {step}...", flush=True)
        pause(STEP_DELAY)

    print("Application finished successfully!", flush=True)


def run() -> None:
    # signal handlers can only be installed from the main thread
    if threading.current_thread() is not threading.main_thread():
        _steps()
        return

    original_handler = signal.signal(signal.SIGINT, _on_sigint)
    try:
        _steps()
    finally:
        if original_handler is not None:
            signal.signal(signal.SIGINT, original_handler)


def main(argv=None) -> int:
    # arguments are accepted and ignored
    run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
