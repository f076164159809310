"""Helpers for the render and chain tick cadences."""

import time


def deadline_after(seconds):
    return time.time() + seconds


def time_remaining(deadline):
    return deadline - time.time()


def ms_to_seconds(ms):
    if ms < 0:
        raise ValueError("tick interval must be non-negative")
    return ms / 1000.0
