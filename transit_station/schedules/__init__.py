from .schemas import Schedule

__all__ = ["Schedule"]
