"""
Errors raised by the analysis core.
"""


class InvalidConfiguration(ValueError):
    """A block size, chart size or worker count that makes no sense."""
