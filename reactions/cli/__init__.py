"""
Reactions CLI

Commands:
- reactions diff - Changed paths between two JSON states
- reactions replay - Replay an action log against a state
- reactions inspect - Show compiled reaction tries
"""

from .. import __version__

__all__ = ["__version__"]
