from . import engine
from .independent import Independent

__all__ = ["engine", "Independent"]
