"""Move selection policies."""

from .decision import DecisionPolicy, PolicyConfig

__all__ = ["DecisionPolicy", "PolicyConfig"]
