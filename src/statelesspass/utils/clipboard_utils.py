import pyperclip
import time
import threading
import secrets
import string

from statelesspass.config.config_pass import *

def copy_to_clipboard(text: str,
                       timeout: int = CLIPBOARD_TIMEOUT,
                         prompt = False) -> bool:
    """
    Copy a generated password to the system clipboard with auto-clear.

    Optionally prompts the user before copying. If a timeout is
    specified, a background daemon thread clears the clipboard after
    the delay to reduce exposure of the password.

    Args:
        text: Text to copy to the clipboard.
        timeout: Number of seconds before the clipboard is cleared.
            A value of 0 or less disables auto-clear.
        prompt: If True, prompt the user before copying. If False,
            copy immediately.

    Returns:
        True if the text was copied.

    Side Effects:
        Copies data to the system clipboard.
        Spawns a background daemon thread if auto-clear is enabled.

    Security Notes:
        - Clipboard is cleared after the timeout when enabled.
        - Clipboard history may be wiped depending on configuration.
    """
    if not text:
        print(" Nothing to copy.")
        return False

    if prompt and input(" Copy to clipboard? (y/n): ").strip().lower() != "y":
        return False

    pyperclip.copy(text)

    msg = " Copied!" + (f" (auto-clears in {timeout}s)" if timeout > 0 else "")
    print(msg, flush=True)

    if timeout <= 0:
        return True

    def auto_clear():
        time.sleep(timeout)
        try:
            # Only clear if the clipboard still holds our password
            if pyperclip.paste() == text:
                pyperclip.copy("")
        except pyperclip.PyperclipException:
            # clipboard may be gone by now (headless session, closed display)
            pass

    threading.Thread(target=auto_clear, daemon=True).start()

    return True

def clear_clipboard_history(clipboard_length: int = CLIPBOARD_LENGTH):
    """
    Attempt to wipe clipboard history by flooding it with random data.

    Overwrites the clipboard repeatedly with randomly generated strings
    in an effort to evict passwords from clipboard history.
    Behavior depends on platform and clipboard manager capabilities.

    Args:
        clipboard_length: Number of random clipboard entries to generate.

    Side Effects:
        Overwrites the system clipboard multiple times.

    Security Notes:
        - Disabled if WIPE_CLIPBOARD is False in configuration.
        - Best-effort only; some clipboard managers retain long histories.
    """
    # Simple overwrite on exit
    pyperclip.copy("")

    if not WIPE_CLIPBOARD:
        return

    char_set = string.ascii_letters + string.digits + "!@#$%^&*"

    for i in range(clipboard_length):
        fake_data = ''.join(secrets.choice(char_set) for _ in range(40))
        pyperclip.copy(f"[{i:03d}] {fake_data}")

        # Defeats throttling
        time.sleep(0.07)

    pyperclip.copy("Clipboard history cleared")
