#
# src/treerun/discovery.py
#
"""
Builds test trees from Python modules and classes.

This sits outside the engine: it only produces a `Test` value that is then
handed to `run` or `run_parallel`.
"""

import importlib
import importlib.util
import inspect
import sys
from pathlib import Path
from types import ModuleType

import structlog

from treerun.exceptions import DiscoveryError
from treerun.tree import Case, Labeled, Test, TestList

log = structlog.get_logger("discovery")

TEST_PREFIX = "test"
CLASS_PREFIX = "Test"
TREE_ATTRIBUTE = "tests"
# File targets are registered under this prefix so they cannot shadow real modules.
TARGET_MODULE_PREFIX = "treerun_target_"


def _takes_no_arguments(fn) -> bool:
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return False
    return all(
        p.default is not inspect.Parameter.empty or p.kind in (p.VAR_POSITIONAL, p.VAR_KEYWORD)
        for p in signature.parameters.values()
    )


def from_function(fn) -> Labeled:
    return Labeled(fn.__name__, Case(fn))


def from_class(cls: type) -> Labeled:
    """Collects zero-argument static methods named ``test*``."""
    tests: list[Test] = []
    for name, member in vars(cls).items():
        if not name.startswith(TEST_PREFIX) or not isinstance(member, staticmethod):
            continue
        fn = member.__func__
        if _takes_no_arguments(fn):
            tests.append(Labeled(name, Case(fn)))
    return Labeled(cls.__name__, TestList(tests))


def from_module(module: ModuleType, label: str | None = None) -> Test:
    """
    Builds a tree from a module.

    A module-level ``tests`` attribute holding a tree wins. Otherwise the tree
    is labeled with ``label`` or the last segment of the module name, and
    holds the module's own zero-argument ``test*`` functions followed by its
    ``Test*`` classes, in definition order.
    """
    existing = getattr(module, TREE_ATTRIBUTE, None)
    if isinstance(existing, Case | TestList | Labeled):
        log.debug("Using module test tree", module=module.__name__)
        return existing

    tests: list[Test] = []
    for name, member in vars(module).items():
        if getattr(member, "__module__", None) != module.__name__:
            continue
        if inspect.isfunction(member) and name.startswith(TEST_PREFIX) and _takes_no_arguments(member):
            tests.append(from_function(member))
        elif inspect.isclass(member) and name.startswith(CLASS_PREFIX):
            tests.append(from_class(member))

    log.debug("Discovered tests in module", module=module.__name__, entries=len(tests))
    if label is None:
        label = module.__name__.rsplit(".", 1)[-1]
    return Labeled(label, TestList(tests))


def _import_path(path: Path) -> ModuleType:
    module_name = f"{TARGET_MODULE_PREFIX}{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise DiscoveryError("Cannot load file as a Python module", target=str(path))
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(module_name, None)
        raise
    return module


def load_target(target: str) -> Test:
    """Imports a dotted module name or a ``.py`` file and returns its tree."""
    path = Path(target)
    label = None
    try:
        if path.suffix == ".py":
            if not path.is_file():
                raise DiscoveryError("Test file not found", target=target)
            module = _import_path(path.resolve())
            label = path.stem
        else:
            module = importlib.import_module(target)
    except DiscoveryError:
        raise
    except Exception as e:
        log.error("Failed to import test target", target=target, error=str(e))
        raise DiscoveryError("Failed to import test target", target=target, details=e) from e
    return from_module(module, label=label)

# 🔼⚙️
