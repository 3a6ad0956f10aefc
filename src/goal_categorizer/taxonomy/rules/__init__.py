# SPDX-License-Identifier: MIT
# src/goal_categorizer/taxonomy/rules/__init__.py
from .registry import REGISTRY, register, Details, ordered_rules, validate_registry

__all__ = ("REGISTRY", "register", "Details", "ordered_rules", "validate_registry")
