"""epochctl: convert unix timestamps and formatted datetimes."""

__version__ = "0.1.0"
