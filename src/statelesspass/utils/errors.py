"""
Exceptions raised while deriving passwords or handling profile files.

Every derivation error is an input-validation failure raised before any
key stretching starts. Retrying with the same input cannot succeed.
Messages name the violated precondition and never contain the master
password, the derived entropy or a generated password.
"""


class DerivationError(ValueError):
    """Base class for all password derivation failures."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class InvalidProfile(DerivationError):
    """Site or login is empty, or counter/length is out of range."""


class NoCharacterClassSelected(DerivationError):
    """No character class selected, the alphabet would be empty."""

    def __init__(self, message: str = "Select at least one character set",
                 field: str | None = "character_classes"):
        super().__init__(message, field)


class InvalidInput(DerivationError):
    """Master password or salt is empty."""


class EmptyAlphabet(DerivationError):
    """Encoder called with an empty alphabet."""

    def __init__(self, message: str = "Alphabet is empty",
                 field: str | None = "alphabet"):
        super().__init__(message, field)


class ProfileStoreError(ValueError):
    """Profile file is unreadable, corrupted or in the wrong format."""
