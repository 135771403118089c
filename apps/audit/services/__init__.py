from .recorder import record

__all__ = ['record']
