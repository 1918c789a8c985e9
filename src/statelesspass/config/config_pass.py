# config_pass.py
"""
Configuration constants
"""
from pathlib import Path
# ==============================================================
# Profile store settings
# ==============================================================
# Software version
VERSION = "1.0.0"

# Profile records are public parameters only. The master password is never written.
# Profile and export files live in the directory the program is started from
BASE_DIR = Path.cwd()
PROFILES_FILE = BASE_DIR / "statelesspass_profiles.json"
EXPORT_DIR = BASE_DIR
IMPORT_DIR = BASE_DIR

# Length of generated profile id (bytes)
ID_LEN = 9

# ==============================================================
# Profile defaults
# ==============================================================
PROFILE_DEFAULTS = {
    "length": 16,                   # Default generated password length
    "counter": 1,                   # Increment to rotate a password
    "lowercase": True,
    "uppercase": True,
    "numbers": True,
    "symbols": True,
}
MIN_LENGTH = 1
MAX_LENGTH = 512                    # Keeps the encoder loop bounded

# ==============================================================
# Clipboard security
# ==============================================================
CLIPBOARD_TIMEOUT = 30               # Seconds before auto-clear
WIPE_CLIPBOARD = True                # Enable/disable clipboard flooding
CLIPBOARD_LENGTH = 80                # Number of entries to flood

# ==============================================================
# Display & formatting
# ==============================================================
UTF8 = "utf-8"
DT_FORMAT_EXPORT = "YYYY-MM-DD"
CLEAR_SCREEN = True

# length of visible name when displaying profiles
SITE_LEN = 20
LOGIN_LEN = 22

# separator
SEP_LG = "="*50
SEP_SM = "-"*50

# ==============================================================
# Optional: local overrides
# Local configuration file overrides standard config values

# ==============================================================
try:
    from statelesspass.config.config_local import *
except ImportError:
    pass  # No local config - use defaults above

# ==============================================================
# Derivation parameters
# Defined after local overrides so config_local cannot change them.
# ==============================================================
# PBKDF2-HMAC-SHA256 parameters.
# Changing any of these changes every password ever generated. DO NOT CHANGE
PBKDF2_ITERATIONS = 100_000
KEY_LEN = 32               # bytes - 256 bit entropy buffer

# Character ranges, in fixed alphabet order. DO NOT CHANGE
CHARSETS = {
    "lowercase": "abcdefghijklmnopqrstuvwxyz",
    "uppercase": "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "digits":    "0123456789",
    "symbols":   "!@#$%^&*()_+-=[]{}|;:,.<>?",
}
