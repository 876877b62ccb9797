"""userhub - user registration service core."""

__version__ = "0.1.0"
