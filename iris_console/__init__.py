"""In-memory caregiver alert console."""

__version__ = "0.1.0"
