# src/treerun/telemetry/__init__.py

"""
Logging setup for treerun.
"""

from .logger import StructLogger, setup_logging

__all__ = ["StructLogger", "setup_logging"]
