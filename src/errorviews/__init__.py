"""Exception-to-view resolution for FastAPI applications."""

__version__ = "0.1.0"
