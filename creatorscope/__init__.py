"""creatorscope - YouTube channel evaluation for brand partnerships."""

__version__ = "1.0.0"

from . import analyzer
