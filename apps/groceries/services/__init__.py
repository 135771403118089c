from .reconciler import Reconciliation, reconcile

__all__ = ['Reconciliation', 'reconcile']
