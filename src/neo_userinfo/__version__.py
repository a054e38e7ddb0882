"""Version information for neo-userinfo."""

__version__ = "0.1.0"
