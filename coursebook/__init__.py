"""Course structure, schedules, preprocessing and exercise extraction for mdBook course books."""

__version__ = "0.1.0"