"""
Gut Check Errors

The engine itself never raises for string input. These cover the two
conditions surfaced to callers: missing names and bad configuration.
"""


class GutcheckError(Exception):
    """Base class for gut check errors"""


class MissingNameError(GutcheckError, ValueError):
    """A required candidate name was empty or whitespace-only"""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"A name is required for '{field}'")


class ConfigError(GutcheckError, ValueError):
    """Configuration data failed validation"""
