"""Rules engine for a gamebook-style role-playing adventure: items, characters, trials, questions and layout helpers."""

__version__ = "0.1.0"