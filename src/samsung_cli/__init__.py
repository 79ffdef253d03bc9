"""
samsung_cli - Control de funciones de los Samsung Galaxy Book vía sysfs.
"""

__version__ = "1.0.0"
