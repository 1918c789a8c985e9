"""
StatelessPass - deterministic password generation.

The same master password and the same public profile parameters always
regenerate the same password, so nothing secret is ever stored.
"""

__version__ = "1.0.0"

from statelesspass.utils.errors import (
    DerivationError,
    EmptyAlphabet,
    InvalidInput,
    InvalidProfile,
    NoCharacterClassSelected,
)
from statelesspass.utils.password_generator import (
    CharacterClass,
    DerivationRequest,
    generate_password,
)

__all__ = [
    'CharacterClass',
    'DerivationError',
    'DerivationRequest',
    'EmptyAlphabet',
    'InvalidInput',
    'InvalidProfile',
    'NoCharacterClassSelected',
    'generate_password',
]
