import os
import json
import logging

from pathlib import Path
from typing import Any, Dict, List

from statelesspass.config.config_pass import *
from statelesspass.config.logging_config import timestamp
from .crypto_utils import new_profile_id
from .errors import DerivationError, ProfileStoreError
from .Profile import Profile

logger = logging.getLogger(__name__)

# Fields a profile update may change. id and createdAt are kept.
EDITABLE_FIELDS = ("site", "login", "length", "counter",
                   "lowercase", "uppercase", "numbers", "symbols")


def load_profiles(path: Path = PROFILES_FILE) -> List[Profile]:
    """
    Load the profile file.

    A missing file is an empty collection. Records that fail validation
    are skipped and logged so one bad record does not lock the user out
    of the rest.

    Args:
        path: Location of the profile JSON file.

    Returns:
        List of Profile objects in file order.

    Raises:
        ProfileStoreError: If the file is not valid UTF-8 JSON or not a JSON array.
    """
    path = Path(path)
    if not path.exists():
        return []

    try:
        with path.open("r", encoding=UTF8) as f:
            data: Any = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        msg = f"Profile file {path.name} is not valid JSON or is corrupted!"
        logger.error(f"[{timestamp()}] {msg} {e}\n")
        raise ProfileStoreError(msg) from e

    if not isinstance(data, list):
        msg = f"Profile file {path.name} must contain a list of profiles"
        logger.error(f"[{timestamp()}] {msg}\n")
        raise ProfileStoreError(msg)

    profiles: List[Profile] = []
    for i, record in enumerate(data):
        try:
            profiles.append(Profile.from_dict(record))
        except (TypeError, DerivationError) as e:
            logger.error(f"[{timestamp()}] skipped invalid profile #{i}: {e}\n")

    return profiles

def save_profiles(profiles: List[Profile], path: Path = PROFILES_FILE) -> None:
    """
    Save the profile collection to disk.

    Writes to a temporary file first and atomically replaces the profile
    file, so a crash mid-write never leaves a truncated file behind.

    Args:
        profiles: Profiles to persist.
        path: Location of the profile JSON file.

    Side Effects:
        Atomically overwrites the profile file on disk.
    """
    path = Path(path)
    data = [p.to_dict() for p in profiles]

    # Write to temporary file first.
    tmp = path.with_suffix(path.suffix + ".tmp")
    with open(tmp, "w", encoding=UTF8) as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.flush()
        os.fsync(f.fileno()) # force to disk

    # Atomic replace the profile file. Then clear tmp.
    os.replace(tmp, path)

def add_profile(profiles: List[Profile], profile: Profile) -> Profile:
    """Append a profile, regenerating its id on collision."""
    existing = {p.pid for p in profiles}
    while profile.pid in existing:
        profile.pid = new_profile_id()
    profiles.append(profile)
    return profile

def find_profile(profiles: List[Profile], pid: str) -> Profile | None:
    for profile in profiles:
        if profile.pid == pid:
            return profile
    return None

def update_profile(profiles: List[Profile], pid: str,
                   changes: Dict[str, Any]) -> Profile | None:
    """
    Replace the editable fields of a profile.

    The result is validated as a whole before the stored profile is
    touched, so a rejected update leaves the collection unchanged.

    Args:
        profiles: Profile collection.
        pid: Id of the profile to update.
        changes: New values keyed like `Profile.to_dict`. Keys other than
            EDITABLE_FIELDS are ignored.

    Returns:
        The updated Profile, or None if no profile has that id.

    Raises:
        InvalidProfile: If the updated site or login is empty.
        NoCharacterClassSelected: If the update disables every set.
    """
    for i, old in enumerate(profiles):
        if old.pid != pid:
            continue
        data = old.to_dict()
        data.update({k: v for k, v in changes.items() if k in EDITABLE_FIELDS})
        updated = Profile.from_dict(data)
        profiles[i] = updated
        return updated
    return None

def delete_profile(profiles: List[Profile], pid: str) -> bool:
    """Remove a profile by id. Returns False if it was not found."""
    for i, profile in enumerate(profiles):
        if profile.pid == pid:
            del profiles[i]
            return True
    return False

def search_profiles(profiles: List[Profile], query: str | None = None) -> List[Profile]:
    """
    Filter and sort profiles for display.

    Args:
        profiles: Profile collection.
        query: Optional case-insensitive text. A profile matches if the
            text appears in its site or its login.

    Returns:
        Matching profiles sorted by site, then login (case-insensitive).
    """
    matches = profiles
    if query:
        term = query.lower().strip()
        matches = [
            p for p in profiles
            if term in p.site.lower() or term in p.login.lower()
        ]

    return sorted(matches, key=lambda p: (p.site.lower(), p.login.lower()))

def list_profiles(profiles: List[Profile], query: str | None = None) -> List[str]:
    """
    Print a numbered table of matching profiles.

    Args:
        profiles: Profile collection.
        query: Optional search text, see `search_profiles`.

    Returns:
        Profile ids in the order displayed. Empty if nothing matched.

    Side Effects:
        Prints to stdout.
    """
    if not profiles:
        print("No saved profiles. Add one to start generating passwords.")
        return []

    matches = search_profiles(profiles, query)
    if not matches:
        print("  No profiles found. Try a different search.")
        return []

    print(SEP_SM)
    print(f" {'#':>5}   → {'Site':^{SITE_LEN}}  {'Login':^{LOGIN_LEN}}")
    print(SEP_SM)

    pid_list: List[str] = []
    for i, p in enumerate(matches):
        site = p.site if len(p.site) <= SITE_LEN else p.site[:SITE_LEN-3] + "..."
        login = p.login if len(p.login) <= LOGIN_LEN else p.login[:LOGIN_LEN-3] + "..."
        # Print starting at 1 for ease of use. Subtract 1 when selecting
        print(f"{i+1:>6}   → {site:^{SITE_LEN}}  {login:^{LOGIN_LEN}}")
        pid_list.append(p.pid)

    return pid_list

def display_profile(profile: Profile) -> None:
    """Print the public settings of a profile."""
    print(SEP_LG)
    print(f"  Site:     {profile.site}")
    print(f"  Login:    {profile.login}")
    print(f"  Length:   {profile.length}")
    print(f"  Counter:  {profile.counter}")
    print(f"  Sets:     {profile.class_tags()}")
    print(SEP_LG)
