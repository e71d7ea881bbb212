"""The ``sentinel-launch`` command line."""
