import re

from statelesspass.config.config_pass import PROFILE_DEFAULTS, MAX_LENGTH


def get_int(prompt: str, default=None):
    """
    Prompt the user until a valid positive integer is entered.

    Allows the user to press Enter to accept a default value if provided.
    Rejects any input containing non-digit characters.

    Args:
        prompt: Text displayed to the user.
        default: Value returned if the user submits empty input. If None,
            the prompt repeats until a valid integer is entered.

    Returns:
        An integer parsed from user input, the default value if accepted,
        or None if the user enters 'q' to quit.
    """
    while True:
        val = input(prompt).strip()

        # User hit enter for default value
        # return default if provided, else keep asking
        if not val and default is not None:
            return default
        # User typed something, check it, return if integer
        if re.fullmatch(r"[0-9]+", val):
            return int(val)
        # Allow quitting with "q"
        if val == 'q':
            return None

        print("   Invalid — numbers only  (q) to quit")


def get_yes_no(prompt: str, default: bool) -> bool:
    """
    Ask a y/n question. Enter keeps the default.
    """
    hint = "Y/n" if default else "y/N"
    while True:
        val = input(f"{prompt} ({hint}): ").strip().lower()
        if not val:
            return default
        if val in ("y", "yes"):
            return True
        if val in ("n", "no"):
            return False
        print("   Invalid — type y or n")


def ask_profile_fields(current: dict | None = None) -> dict | None:
    """
    Prompt for the public fields of a profile.

    Enter keeps the current value when editing, or the default when
    creating. Values are returned unvalidated, `Profile` validates them.

    Args:
        current: Existing profile data (as from `Profile.to_dict`) or None.

    Returns:
        Dictionary of profile fields, or None if the user quits.
    """
    base = dict(PROFILE_DEFAULTS)
    base.update({"site": "", "login": ""})
    if current:
        base.update(current)

    fields = {}
    for name, label in (("site", "Site"), ("login", "Login")):
        shown = f" [{base[name]}]" if base[name] else " (required)"
        val = input(f"{label}{shown}: ").strip()
        fields[name] = val or base[name]

    length = get_int(f"Length (1-{MAX_LENGTH}) [{base['length']}]: ", default=base["length"])
    if length is None:
        return None
    counter = get_int(f"Counter [{base['counter']}]: ", default=base["counter"])
    if counter is None:
        return None
    fields["length"] = length
    fields["counter"] = counter

    fields["lowercase"] = get_yes_no(" Lowercase abc", base["lowercase"])
    fields["uppercase"] = get_yes_no(" Uppercase ABC", base["uppercase"])
    fields["numbers"] = get_yes_no(" Numbers 123", base["numbers"])
    fields["symbols"] = get_yes_no(" Symbols !@#", base["symbols"])

    return fields
