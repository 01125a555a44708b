"""Read calculators and courses from files."""

from . import calculators
from . import courses

__all__ = ["calculators", "courses"]
