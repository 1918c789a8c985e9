# Local configuration file overrides standard config values - never commit this file!
# Used for changing user defaults. Derivation parameters (PBKDF2_ITERATIONS, KEY_LEN,
# CHARSETS) are set after this file is loaded and cannot be overridden.
from pathlib import Path
from statelesspass.config.config_pass import PROFILE_DEFAULTS

PROFILES_FILE = Path.home() / ".statelesspass_profiles.json"
CLIPBOARD_TIMEOUT = 20
WIPE_CLIPBOARD = False
PROFILE_DEFAULTS["length"] = 24
PROFILE_DEFAULTS["symbols"] = False
CLEAR_SCREEN = False

# Rename this file to config_local.py to enable it
