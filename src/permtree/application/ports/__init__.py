"""Application ports - interfaces for external adapters."""

from permtree.application.ports.permission_evaluator import PermissionEvaluator
from permtree.application.ports.unit_of_work import UnitOfWork

__all__ = [
    "PermissionEvaluator",
    "UnitOfWork",
]
