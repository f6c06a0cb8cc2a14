"""sysline – host resource snapshots as line-delimited JSON."""

__version__ = "0.1.0"
