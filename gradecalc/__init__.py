"""Track course assessments and calculate current, required and hypothetical grades."""

__version__ = "0.1.0"