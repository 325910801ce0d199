#!/usr/bin/env python3
"""
Demo script showing client_logger usage.

This example demonstrates:
1. Logging by path through the procedure registry
2. Sending a caught exception as a serialized error
3. Changing the level at runtime
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import client_logger
from client_logger import create_logger, create_timestamped_formatter, set_logger
from procbus import call


def demo_path_logging():
    """Demo logging through log.* paths"""
    print("\n=== Path-addressed logging ===")

    call(["log", "info"], {"message": "Application started"})
    call("log.info", {"message": "User login", "context": "auth", "data": {"user_id": 123}})
    call("log.debug", {"message": "Not shown at INFO"})


def demo_error_logging():
    """Demo sending an exception over a procedure call"""
    print("\n=== Error logging ===")

    try:
        raise ValueError("Something went wrong")
    except ValueError as e:
        client_logger.log_error("Error processing request", data={"request_id": "req-456"}, error=e)


def demo_levels():
    """Demo runtime level changes"""
    print("\n=== Levels ===")

    print(call("log.getLevel"))
    call("log.setLevel", {"level": "debug"})
    call("log.debug", {"message": "Now visible"})
    print(call("log.getLevel"))


if __name__ == '__main__':
    set_logger(create_logger(context="demo", formatter=create_timestamped_formatter()))
    demo_path_logging()
    demo_error_logging()
    demo_levels()
