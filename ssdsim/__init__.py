"""File-backed SSD simulator with an optimising write/erase command buffer."""

__version__ = "0.1.0"