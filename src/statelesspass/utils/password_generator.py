from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable

from statelesspass.config.config_pass import *
from .crypto_utils import build_salt, derive_key
from .errors import EmptyAlphabet, InvalidInput, InvalidProfile, NoCharacterClassSelected


class CharacterClass(Enum):
    """
    Character sets a password may draw from.

    Declaration order is the alphabet order. Do not reorder.
    """
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    DIGITS = "digits"
    SYMBOLS = "symbols"

    @property
    def chars(self) -> str:
        return CHARSETS[self.value]


ALL_CLASSES: FrozenSet[CharacterClass] = frozenset(CharacterClass)


@dataclass(frozen=True)
class DerivationRequest:
    """
    Everything needed to recompute one password.

    All fields except master_secret are public and may be stored in a
    profile. The master secret is supplied per call and hidden from repr.
    """
    site: str
    login: str
    master_secret: str = field(repr=False)
    counter: int = PROFILE_DEFAULTS["counter"]
    length: int = PROFILE_DEFAULTS["length"]
    character_classes: FrozenSet[CharacterClass] = ALL_CLASSES


def build_alphabet(classes: Iterable[CharacterClass]) -> str:
    """
    Concatenate the selected character sets in fixed class order.

    Duplicate characters are dropped, keeping the first occurrence, so the
    same selection always maps the same index to the same character.

    Args:
        classes: Any iterable of CharacterClass members. Order and repeats
            are ignored.

    Returns:
        The alphabet string, empty if nothing was selected.
    """
    selected = set(classes)
    alphabet = []
    seen = set()
    for char_class in CharacterClass:
        if char_class not in selected:
            continue
        for c in char_class.chars:
            if c not in seen:
                seen.add(c)
                alphabet.append(c)
    return "".join(alphabet)

def encode_entropy(entropy: bytes, alphabet: str, length: int) -> str:
    """
    Map derived entropy onto the alphabet.

    Position i takes alphabet[entropy[i % len(entropy)] % len(alphabet)].
    Positions past the end of the buffer reuse its bytes cyclically.

    The byte-modulo mapping is slightly biased whenever the alphabet size
    does not divide 256. It is kept as is: any other mapping would change
    every previously generated password.

    Args:
        entropy: Output of `derive_key`.
        alphabet: Output of `build_alphabet`.
        length: Number of characters to produce. 0 gives "".

    Returns:
        The encoded password.

    Raises:
        EmptyAlphabet: If the alphabet is empty.
        InvalidInput: If entropy is empty while characters are requested.
    """
    if not alphabet:
        raise EmptyAlphabet()
    if length > 0 and not entropy:
        raise InvalidInput("Entropy buffer is empty", field="entropy")

    n = len(entropy)
    return "".join(
        alphabet[entropy[i % n] % len(alphabet)]
        for i in range(length)
    )

def generate_password(request: DerivationRequest) -> str:
    """
    Derive the password for a request.

    Pure function of its input: the same request returns the same
    password on every run and every platform. All validation happens
    before the key stretching starts.

    Args:
        request: Public profile parameters plus the master secret.

    Returns:
        A password of exactly request.length characters drawn from the
        alphabet of request.character_classes.

    Raises:
        NoCharacterClassSelected: If no CharacterClass member is selected.
        InvalidProfile: If site or login is empty, or counter/length is
            out of range.
        InvalidInput: If the master secret is empty.
    """
    alphabet = build_alphabet(request.character_classes)
    if not alphabet:
        raise NoCharacterClassSelected()
    if not request.site:
        raise InvalidProfile("Site cannot be empty", field="site")
    if not request.login:
        raise InvalidProfile("Login cannot be empty", field="login")
    if not request.master_secret:
        raise InvalidInput("Master password cannot be empty", field="master_secret")
    if not _is_int(request.counter) or request.counter < 1:
        raise InvalidProfile(f"Counter must be an integer >= 1, got {request.counter!r}",
                             field="counter")
    if not _is_int(request.length) or not MIN_LENGTH <= request.length <= MAX_LENGTH:
        raise InvalidProfile(
            f"Length must be between {MIN_LENGTH} and {MAX_LENGTH}, got {request.length!r}",
            field="length")

    salt = build_salt(request.site, request.login, request.counter)
    entropy = derive_key(request.master_secret, salt)

    password = encode_entropy(entropy, alphabet, request.length)
    del entropy
    return password


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
