"""Printing values to the debugging console."""

import sys


def _format(value):
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:f}"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (bytes, bytearray)):
        return value.decode("latin-1")
    return str(value)


def print_value(value):
    """Write a value to standard output without a newline."""
    sys.stdout.write(_format(value))
    sys.stdout.flush()


def print_line(value):
    """Write a value followed by a newline to standard output."""
    print_value(value)
    print_value("\n")