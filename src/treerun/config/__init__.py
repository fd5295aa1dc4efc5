#
# config/__init__.py
#
"""
Configuration handling sub-package for treerun.

Exports the loading function and core configuration models.
"""

from .loader import load_config
from .models import GlobalConfig, RunnerConfig, TreerunConfig

__all__ = [
    "GlobalConfig",
    "RunnerConfig",
    "TreerunConfig",
    "load_config",
]

# 🔼⚙️
