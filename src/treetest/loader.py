"""Resolve a command line target such as ``suite.py:T`` to a Tester."""

from __future__ import annotations

import hashlib
import importlib
import importlib.util
import sys
from pathlib import Path
from types import ModuleType

from treetest.tester import Tester


def _import_file(path: Path) -> ModuleType:
    if not path.exists():
        raise FileNotFoundError(f"Test file not found: {path}")

    resolved = path.resolve()
    digest = hashlib.sha1(str(resolved).encode()).hexdigest()[:8]
    module_name = f"treetest_target_{resolved.stem}_{digest}"

    spec = importlib.util.spec_from_file_location(module_name, resolved)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot import test file: {path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        del sys.modules[module_name]
        raise
    return module


def _split_target(target: str) -> tuple[str, str | None]:
    # Leave Windows drive letters ("C:\\...") intact
    head, sep, attr = target.rpartition(":")
    if not sep or not attr or "/" in attr or "\\" in attr or not head:
        return target, None
    return head, attr


def load_tester(target: str) -> Tester:
    """Load the Tester named by ``target``.

    ``target`` is ``path/to/file.py`` or ``package.module``, optionally
    followed by ``:attr``. Without ``attr`` the module must define exactly one
    module-level Tester.
    """
    location, attr = _split_target(target)

    if location.endswith(".py") or Path(location).is_file():
        module = _import_file(Path(location))
    else:
        module = importlib.import_module(location)

    if attr is not None:
        if not hasattr(module, attr):
            raise ValueError(f"Module '{location}' has no attribute '{attr}'")
        obj = getattr(module, attr)
        if not isinstance(obj, Tester):
            raise TypeError(
                f"'{location}:{attr}' is a {type(obj).__name__}, not a Tester"
            )
        return obj

    found = {
        name: value for name, value in vars(module).items() if isinstance(value, Tester)
    }
    if len(found) != 1:
        names = ", ".join(sorted(found)) or "none"
        raise ValueError(
            f"Expected exactly one Tester in '{location}' (found: {names}). "
            f"Use '{location}:<name>' to pick one."
        )
    return next(iter(found.values()))
