"""
Operations app services layer.

``execute`` runs every household mutation as one audited, atomic unit.
"""

from .executor import (
    Operation,
    OperationResult,
    UnitOfWork,
    execute,
)


__all__ = [
    'Operation',
    'OperationResult',
    'UnitOfWork',
    'execute',
]
