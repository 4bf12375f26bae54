"""Time-travel boarding desk: waiting list, boarded passengers, eras and a console menu."""

__version__ = "0.1.0"
__all__ = ["__version__"]