import os
import json
import logging

from pathlib import Path
from typing import Any, List

import pendulum

from statelesspass.config.config_pass import *
from statelesspass.config.logging_config import timestamp
from .crypto_utils import new_profile_id
from .errors import DerivationError, ProfileStoreError
from .Profile import Profile
from .profile_utils import add_profile

logger = logging.getLogger(__name__)


def export_profiles(profiles: List[Profile], export_dir: Path = EXPORT_DIR) -> Path:
    """
    Export all profiles to a dated JSON file.

    Profiles contain public parameters only, so the export holds no
    secrets. It is enough, together with the master password, to
    regenerate every password on another device.

    Args:
        profiles: Profiles to export.
        export_dir: Directory the file is written to.

    Returns:
        Path of the written file, named statelesspass-profiles-YYYY-MM-DD.json.

    Side Effects:
        Writes a file to disk.
    """
    date = pendulum.now().format(DT_FORMAT_EXPORT)
    file_path = Path(export_dir) / f"statelesspass-profiles-{date}.json"

    with open(file_path, "w", encoding=UTF8) as f:
        json.dump([p.to_dict() for p in profiles], f, indent=2, ensure_ascii=False)
        f.flush()
        os.fsync(f.fileno()) # force to disk

    return file_path

def import_profiles(filepath: Path, profiles: List[Profile]) -> int:
    """
    Import profiles from a previously exported JSON file.

    Every imported record gets a new id so imports never overwrite
    existing profiles. Records that fail validation are skipped and logged.

    Args:
        filepath: Path of the JSON file.
        profiles: In-memory profile collection to append to.

    Returns:
        Number of profiles imported.

    Raises:
        ProfileStoreError: If the file is not UTF-8 JSON or not a JSON array.
        OSError: If the file cannot be read.

    Side Effects:
        Modifies the in-memory collection. The caller saves it.
    """
    filepath = Path(filepath)
    try:
        with open(filepath, "r", encoding=UTF8) as f:
            data: Any = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ProfileStoreError(f"{filepath.name} is not valid UTF-8 JSON") from e

    if not isinstance(data, list):
        raise ProfileStoreError("Invalid file format")

    imported_count = 0
    for i, record in enumerate(data):
        try:
            profile = Profile.from_dict(record)
        except (TypeError, DerivationError) as e:
            msg = f"Skipped record #{i} from {filepath.name}: {e}"
            print(f"  {msg}")
            logger.error(f"[{timestamp()}] {msg}\n")
            continue

        profile.pid = new_profile_id()
        add_profile(profiles, profile)
        imported_count += 1

    return imported_count
