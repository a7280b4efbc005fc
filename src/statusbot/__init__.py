"""
statusbot

Conversational project status assistant: collects project, suite, status,
category and date through a slot-filling dialog, then reports pass/fail counts
from the project status search index.
"""

__version__ = "1.0.0"
