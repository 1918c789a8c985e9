"""
StatelessPass - an offline deterministic password generator
"""
# ==============================================================
# Standard imports
# ==============================================================
import os
import sys
import time
import atexit
import logging
import getpass

# ==============================================================
# Other imports
# ==============================================================

try:
    import pendulum
    from statelesspass.config.config_pass import *
    from statelesspass.config.logging_config import setup_logging
    from statelesspass.utils.errors import DerivationError, ProfileStoreError
    from statelesspass.utils.Profile import Profile
    from statelesspass.utils.profile_utils import (
        load_profiles, save_profiles, add_profile, update_profile, delete_profile,
        find_profile, list_profiles, display_profile)
    from statelesspass.utils.password_generator import generate_password
    from statelesspass.utils.user_input import get_int, ask_profile_fields
    from statelesspass.utils.clipboard_utils import copy_to_clipboard, clear_clipboard_history
    from statelesspass.utils.import_export import export_profiles, import_profiles

except ImportError as e:
    missing_package = e.name if hasattr(e, "name") else "unknown package"
    print("Missing required dependency!")
    print(f"  {missing_package} is not installed")
    logging.error(f"  {missing_package} is not installed. See pyproject.toml")
    print("\nInstall with:")
    print("  pip install .")
    time.sleep(10)
    sys.exit(1)

logger = logging.getLogger(__name__)

# ==============================================================
# Functions
# ==============================================================

def generate_for_profile(profile: Profile) -> str | None:
    """
    Ask for the master password and derive the password of a profile.

    The master password is read with getpass, used for one derivation
    and dropped. It is never stored or logged.

    Args:
        profile: Profile to derive the password for.

    Returns:
        The generated password, or None if the master password was empty
        or the derivation was rejected.

    Side Effects:
        Prompts for user input.
        Copies the password to the clipboard (auto-clears).
    """
    master_pw = getpass.getpass("Master password: ")
    if not master_pw:
        print("   Enter the master password.")
        return None

    print(" Deriving...", flush=True)
    try:
        password = generate_password(profile.to_request(master_pw))
    except DerivationError as e:
        print(f"   Could not generate password: {e}")
        logger.error(f"[{pendulum.now().to_iso8601_string()}] "
                     f"derivation rejected for profile {profile.pid}: {e}\n")
        return None
    finally:
        del master_pw

    copy_to_clipboard(password, timeout=CLIPBOARD_TIMEOUT, prompt=False)
    return password

def edit_profile(profiles: list[Profile], profile: Profile) -> Profile:
    """
    Prompt for new settings and save them.

    Returns:
        The updated Profile, or the unchanged one if the edit was
        cancelled or rejected.
    """
    print("\nEdit profile (Enter keeps the current value, q on a number quits):")
    changes = ask_profile_fields(profile.to_dict())
    if changes is None:
        print("   Edit cancelled")
        return profile
    try:
        updated = update_profile(profiles, profile.pid, changes)
    except DerivationError as e:
        print(f"   Not saved: {e}")
        return profile

    save_profiles(profiles)
    print("   Profile updated")
    return updated or profile

def profile_menu(profiles: list[Profile], pid: str) -> int:
    """
    Display the interactive menu for a single profile.

    Returns:
        0 if the user exits normally.
        1 if the profile no longer exists.
    """
    profile = find_profile(profiles, pid)
    if profile is None:
        print("   Profile not found")
        return 1

    wipe_terminal()
    display_profile(profile)

    while True:
        print(f"\n--- Profile Menu ---\n"
                f"(G) Generate Password   (S) Show Settings\n"
                f"(E) Edit Profile        (D) Delete Profile\n"
                f"(Enter) Main Menu"
                ,end="\n > ")
        choice = input().strip().lower()

        # == GENERATE PASSWORD ===============================
        if choice == "g":
            generate_for_profile(profile)

        # == SHOW SETTINGS ===================================
        elif choice == "s":
            wipe_terminal()
            display_profile(profile)

        # == EDIT PROFILE ====================================
        elif choice == "e":
            profile = edit_profile(profiles, profile)
            display_profile(profile)

        # == DELETE PROFILE ==================================
        elif choice == "d":
            confirm = input(f"\nDelete profile {profile.site}? (type 'del' to confirm): ")
            if confirm.strip().lower() == "del":
                delete_profile(profiles, profile.pid)
                save_profiles(profiles)
                wipe_terminal()
                print("\nProfile deleted.")
                break

        elif choice in {"", "enter", "q"}:
            break

        else:
            print("\rInvalid Choice\n", flush=True)

    return 0

def new_profile(profiles: list[Profile]) -> Profile | None:
    """Prompt for a new profile and save it."""
    fields = ask_profile_fields()
    if fields is None:
        return None
    try:
        profile = Profile.from_dict(fields)
    except DerivationError as e:
        print(f"   {e}")
        return None

    add_profile(profiles, profile)
    save_profiles(profiles)
    print("   Profile added")
    return profile

def wipe_terminal(force=False):
    """
    Clears the terminal screen if CLEAR_SCREEN set to True.

    Args:
        force: Clears even if CLEAR_SCREEN is False.
    """
    if CLEAR_SCREEN or force:
        os.system('cls' if os.name == 'nt' else 'clear')


# ==============================================================
# MAIN
# ==============================================================
def main():
    setup_logging()
    print(f"- StatelessPass v{VERSION} —\n")

    try:
        profiles = load_profiles()
    except ProfileStoreError as e:
        print(e)
        print(f"Fix or move {PROFILES_FILE} and try again.")
        sys.exit(1)

    # clears clipboard on exit
    atexit.register(clear_clipboard_history)
    choice = ''

    while True:
        if choice != "9":
            time.sleep(.3)
            wipe_terminal()

        print("\n--- Main Menu ---")
        print("\n 1) New Profile    2) Find Profile     7) Quit   9) More Options")
        choice = input(" > ").strip()
        print()

        # == ADD PROFILE ====================================
        if choice == "1":
            profile = new_profile(profiles)
            if profile is not None:
                profile_menu(profiles, profile.pid)

        # == FIND PROFILE ===================================
        elif choice == "2":
            print("Search by site or login. Press Enter to show all profiles.")
            query = input("\n Enter search query: ").strip()
            pids = list_profiles(profiles, query)

            if not pids:
                time.sleep(1)
                continue
            while True:
                selection = get_int("\n Select profile: ", default=0)

                # Quit back to main
                if selection is None:
                    break

                # If invalid selection, try again
                if selection > len(pids) or selection < 1:
                    print(f"   Invalid. Select 1 - {len(pids)} or (q) to quit")
                    continue

                profile_menu(profiles, pids[selection - 1])
                break

        # == QUIT ===============================================
        elif choice == "7":
            print("Goodbye!")
            sys.exit(0)

        # == OPTIONS ===============================================
        elif choice == "9":
            print()
            print(f"  export_json  - Exports all profiles (no passwords) to JSON.")
            print(f"  import_json  - Imports profiles from an exported JSON file.")

        # == IMPORT/EXPORT ===================================
        elif choice == "export_json":
            path = export_profiles(profiles)
            print(f" Exported {len(profiles)} profiles to {path.name}")
            time.sleep(1)

        elif choice == "import_json":
            filename = input("Enter JSON filename to import: ").strip()
            if not filename.endswith(".json"):
                filename = f"{filename}.json"
            try:
                count = import_profiles(IMPORT_DIR / filename, profiles)
            except (OSError, ProfileStoreError) as e:
                print(f" Import failed: {e}")
                logger.error(f"[{pendulum.now().to_iso8601_string()}] import of {filename} failed: {e}\n")
                time.sleep(1)
                continue
            save_profiles(profiles)
            print(f" Imported {count} profiles")
            time.sleep(1)

        else:
            print("Invalid Choice")

if __name__ == "__main__":
    main()
