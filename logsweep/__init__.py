"""logsweep - find and strip console.log calls across a source tree."""

__version__ = "1.0.0"
