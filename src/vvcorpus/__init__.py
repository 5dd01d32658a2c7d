"""vvcorpus — text preparation utilities for voice-synthesis projects."""

__version__ = "0.1.0"
