"""Quiz API — questions and their ordered answers over HTTP."""

__version__ = "1.0.0"
