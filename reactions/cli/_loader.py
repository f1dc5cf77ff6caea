"""
Loading of reaction declarations and JSON states for CLI commands.
"""

import importlib
import json
import os
import sys
from collections.abc import Mapping
from typing import Any

from ..core.errors import ConfigurationError
from ..registry import Reactions


def load_reactions(target: str) -> Reactions:
    """
    Build a Reactions registry from "module:attr".

    attr may be a callable taking the registry (it performs registration), or
    a reaction map / list of maps passed to add_reactions.

    Raises:
        ConfigurationError: If target cannot be imported or has the wrong type
    """
    module_name, _, attr = target.partition(":")
    if not module_name or not attr:
        raise ConfigurationError(f"Expected MODULE:ATTR, got {target!r}")

    # Reaction modules usually live next to the state files, not in site-packages
    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigurationError(f"Cannot import {module_name}: {e}") from e
    try:
        declared = getattr(module, attr)
    except AttributeError as e:
        raise ConfigurationError(f"{module_name} has no attribute {attr}") from e

    reactions = Reactions()
    if isinstance(declared, (Mapping, list, tuple)):
        reactions.add_reactions(declared)
    elif callable(declared):
        declared(reactions)
    else:
        raise ConfigurationError(f"{target} is neither a reaction map nor a registration function")
    return reactions


def load_json(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
