"""A small local question-and-answer assistant backed by a JSON prompt file."""

__version__ = "0.1.0"
__all__ = ["__version__"]