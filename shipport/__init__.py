"""Ship & Port tracker: vessel registry and nearest-port resolution."""

__version__ = "1.0.0"
