# src/treerun/cli/__init__.py
