"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .git_rules import GitIgnoreExclusionRules
from .rule_stack import IgnoreLevel, IgnoreRuleStack, declare_level

__all__ = [
    "BaseExclusionRules",
    "GitIgnoreExclusionRules",
    "IgnoreLevel",
    "IgnoreRuleStack",
    "declare_level",
]
