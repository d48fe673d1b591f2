"""
Repository descriptor resolution.

Turns repository query results into a RepositoryDescriptor, substituting
configured fallback tokens wherever a query fails.
"""

from .resolver import DescriptorResolver, validate_repository_path
from .stage import STAGE_RULES, StageRule, classify_branch

__all__ = [
    "STAGE_RULES",
    "DescriptorResolver",
    "StageRule",
    "classify_branch",
    "validate_repository_path",
]
