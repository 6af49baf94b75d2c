"""A layered WSGI API for registering and removing users."""

__version__ = "0.1.0"