"""Lightweight logging utilities for moves, chains, and debugging."""

import datetime


def log_event(message):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}")


def quiet(_message):
    pass
