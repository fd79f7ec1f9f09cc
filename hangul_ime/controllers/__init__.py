"""
Controller package exports.

Provides a stable import surface for the host-facing glue.
"""

from .input_controller import InputController  # noqa: F401

__all__ = [
    "InputController",
]
