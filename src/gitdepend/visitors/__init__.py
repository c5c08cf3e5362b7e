"""Visitors run at each node of a dependency graph traversal."""

from .base import Visitor, NamedDependenciesVisitor
from .build_and_update import BuildAndUpdateDependenciesVisitor
from .branch import CreateBranchVisitor, DeleteBranchVisitor, ListBranchesVisitor
from .check_out_branch import CheckOutBranchVisitor
from .clean import CleanVisitor
from .display_status import DisplayStatusVisitor
from .list_all_dependencies import ListAllDependenciesVisitor

__all__ = [
    'Visitor',
    'NamedDependenciesVisitor',
    'BuildAndUpdateDependenciesVisitor',
    'CheckOutBranchVisitor',
    'CleanVisitor',
    'CreateBranchVisitor',
    'DeleteBranchVisitor',
    'DisplayStatusVisitor',
    'ListAllDependenciesVisitor',
    'ListBranchesVisitor',
]
