from dataclasses import dataclass, field
from typing import FrozenSet
import pendulum
from statelesspass.config.config_pass import PROFILE_DEFAULTS, MIN_LENGTH, MAX_LENGTH
from .crypto_utils import new_profile_id
from .errors import InvalidProfile, NoCharacterClassSelected
from .password_generator import CharacterClass, DerivationRequest

@dataclass
class Profile:
    """
    Public parameters of one generated password.

    A profile never holds the master password or the password itself,
    only what is needed to recompute it.
    """
    site: str
    login: str
    length: int = PROFILE_DEFAULTS["length"]
    counter: int = PROFILE_DEFAULTS["counter"]

    lowercase: bool = PROFILE_DEFAULTS["lowercase"]
    uppercase: bool = PROFILE_DEFAULTS["uppercase"]
    numbers: bool = PROFILE_DEFAULTS["numbers"]
    symbols: bool = PROFILE_DEFAULTS["symbols"]

    pid: str = field(default_factory=new_profile_id)
    created: str = field(default_factory=lambda: pendulum.now().to_iso8601_string())


    def __post_init__(self): # logic after the built-in __init__ method has been called.
        """
        Validate and normalize fields.

        Site and login are stripped and must be non-empty. Length and
        counter fall back to their defaults when missing, non-numeric or
        zero. At least one character set must be selected.
        """
        if not isinstance(self.site, str) or not isinstance(self.login, str):
            raise InvalidProfile("Site and login must be strings")

        self.site = self.site.strip()
        self.login = self.login.strip()
        if not self.site:
            raise InvalidProfile("Site cannot be empty", field="site")
        if not self.login:
            raise InvalidProfile("Login cannot be empty", field="login")

        self.length = _to_int(self.length, PROFILE_DEFAULTS["length"])
        self.counter = _to_int(self.counter, PROFILE_DEFAULTS["counter"])
        if self.counter < 1:
            raise InvalidProfile("Counter must be 1 or more", field="counter")
        if not MIN_LENGTH <= self.length <= MAX_LENGTH:
            raise InvalidProfile(f"Length must be between {MIN_LENGTH} and {MAX_LENGTH}",
                                 field="length")

        for flag in ("lowercase", "uppercase", "numbers", "symbols"):
            setattr(self, flag, bool(getattr(self, flag)))
        if not self.character_classes():
            raise NoCharacterClassSelected()

    def __repr__(self):
        return (
            f"Profile(site={self.site}, "
            f"login={self.login}, "
            f"length={self.length}, "
            f"counter={self.counter}, "
            f"classes={self.class_tags()})"
        )

    def character_classes(self) -> FrozenSet[CharacterClass]:
        """Selected character classes as a set."""
        flags = {
            CharacterClass.LOWERCASE: self.lowercase,
            CharacterClass.UPPERCASE: self.uppercase,
            CharacterClass.DIGITS: self.numbers,
            CharacterClass.SYMBOLS: self.symbols,
        }
        return frozenset(c for c, on in flags.items() if on)

    def class_tags(self) -> str:
        """Short labels of the selected sets, e.g. 'abc ABC 123'."""
        tags = []
        if self.lowercase:
            tags.append("abc")
        if self.uppercase:
            tags.append("ABC")
        if self.numbers:
            tags.append("123")
        if self.symbols:
            tags.append("!@#")
        return " ".join(tags)

    def to_request(self, master_pw: str) -> DerivationRequest:
        """
        Combine this profile with the master password.

        Args:
            master_pw: Master password entered by the user for this call.

        Returns:
            DerivationRequest ready for `generate_password`.
        """
        return DerivationRequest(
            site=self.site,
            login=self.login,
            master_secret=master_pw,
            counter=self.counter,
            length=self.length,
            character_classes=self.character_classes(),
        )

    def to_dict(self) -> dict:
        """
        Serialize profile to a dictionary.

        Returns:
            Dictionary representation used by the profile file and exports.
        """
        return {
            "id": self.pid,
            "site": self.site,
            "login": self.login,
            "length": self.length,
            "counter": self.counter,
            "lowercase": self.lowercase,
            "uppercase": self.uppercase,
            "numbers": self.numbers,
            "symbols": self.symbols,
            "createdAt": self.created,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Profile":
        """
        Create a profile from stored or imported data.

        Missing character flags count as not selected, missing length and
        counter take the defaults. A missing id or creation date is
        generated.

        Args:
            data: Profile data.

        Returns:
            Reconstructed Profile instance.

        Raises:
            TypeError: If data is not a dict.
            InvalidProfile: If site or login is missing or empty.
            NoCharacterClassSelected: If no character set is enabled.
        """
        if not isinstance(data, dict):
            raise TypeError("Profile data must be a dict")

        profile = cls(
            site=data.get("site") or "",
            login=data.get("login") or "",
            length=data.get("length", PROFILE_DEFAULTS["length"]),
            counter=data.get("counter", PROFILE_DEFAULTS["counter"]),
            lowercase=data.get("lowercase", False),
            uppercase=data.get("uppercase", False),
            numbers=data.get("numbers", False),
            symbols=data.get("symbols", False),
        )
        if data.get("id"):
            profile.pid = str(data["id"])
        if data.get("createdAt"):
            profile.created = str(data["createdAt"])

        return profile


def _to_int(value, default: int) -> int:
    """Parse an int the lenient way, falling back to default for junk or 0."""
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    return parsed or default
