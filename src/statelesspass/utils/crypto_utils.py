import base64
import secrets
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from statelesspass.config.config_pass import *
from .errors import InvalidInput


def build_salt(site: str, login: str, counter: int) -> bytes:
    """
    Build the salt material for a single credential.

    The salt is the plain concatenation site + login + counter, with the
    counter rendered as a decimal string and no separator. It is public,
    deterministic and never stored: the same triple always yields the
    same bytes, so the password can be recomputed on any device.

    Args:
        site: Site identifier, e.g. "example.com".
        login: Account name on that site.
        counter: Rotation counter, starting at 1.

    Returns:
        UTF-8 encoded salt bytes.
    """
    return f"{site}{login}{int(counter)}".encode(UTF8)

def derive_key(master_pw: str, salt: bytes) -> bytes:
    """
    Stretch the master password into a 256-bit entropy buffer.

    Applies PBKDF2-HMAC-SHA256 with a fixed iteration count. The call is
    CPU bound and blocks for the whole computation; run it on a worker
    thread when the caller must stay responsive.

    Args:
        master_pw: Master password, UTF-8 encoded before stretching.
        salt: Salt material from `build_salt`.

    Returns:
        KEY_LEN (32) bytes of derived entropy.

    Raises:
        InvalidInput: If the master password or the salt is empty.

    Security:
        - Iterations and output length are protocol constants. Changing
          them silently changes every derived password.
        - The salt is deterministic on purpose. Nothing is persisted.
        - The returned buffer must not be logged or stored.
    """
    if not master_pw:
        raise InvalidInput("Master password cannot be empty", field="master_secret")
    if not salt:
        raise InvalidInput("Salt cannot be empty", field="salt")

    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=KEY_LEN,
        salt=bytes(salt),
        iterations=PBKDF2_ITERATIONS,
    )
    return kdf.derive(master_pw.encode(UTF8))


def new_profile_id() -> str:
    """Random URL-safe identifier for a profile record."""
    return bytes_to_str(secrets.token_bytes(ID_LEN))


def bytes_to_str(byt_str: bytes) -> str:
    """
    Encode bytes into a URL-safe base64 string without padding.

    Args:
        byt_str: Raw bytes to encode.

    Returns:
        Base64-encoded string.
    """
    return base64.urlsafe_b64encode(byt_str).decode("ascii").rstrip("=")
