"""Small demos of the SOLID object-oriented design principles."""

__version__ = "0.1.0"
