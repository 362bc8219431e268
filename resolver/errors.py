"""
Exceptions raised while loading or wiring resolver data.

Resolution itself never raises; these only surface at startup.
"""


class ResolverError(Exception):
    """Base class for resolver configuration/data problems."""


class LexiconError(ResolverError, ValueError):
    """Malformed lexicon or fallback table."""


class ConfigError(ResolverError, ValueError):
    """Inconsistent resolver configuration (unknown category, bad rule...)."""
