"""Stack calculator bot: converts item counts into LC/c/st breakdowns."""

__version__ = "0.1.0"
