"""Setup validation and configuration assembly."""

from .aggregator import SetupValidation
from .assembler import DebateAssembler

__all__ = ["DebateAssembler", "SetupValidation"]
