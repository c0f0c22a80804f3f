"""dutil: a disk usage utility inspired by the UNIX du command."""

__version__ = "1.1.0"
