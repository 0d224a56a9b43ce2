import logging
from typing import List
from keepalive.local import effective_settings as config

log = logging.getLogger(__name__)


def _config_show() -> int:
    """Displays the effective value of every modifiable setting."""
    print("\n--- Current Supervisor Configuration ---")
    print(f"(Overrides file: {config.OVERRIDES_JSON_PATH})")
    for key in sorted(config.MODIFIABLE_SETTINGS):
        value = config.get(key, 'N/A')
        if key == "PERMISSION_MODE":
            value = f"{value:o}"
        print(f"  {key} = {value}")
    print("---")
    print("Use 'config set <KEY> <VALUE>' to change a setting.")
    print("Restart the supervisor for changes to apply.")
    print("----------------------------------------\n")
    return 0


def _config_set(args: List[str]) -> int:
    """Persists a single override: 'config set KEY VALUE'."""
    if len(args) < 2:
        log.error("Usage: config set <KEY> <VALUE>")
        return 2
    key, value = args[0].upper(), " ".join(args[1:])
    success, message = config.update_setting(key, value)
    print(message)
    return 0 if success else 1


def handle_config_command(args: List[str]) -> int:
    """
    Handles the 'config' command and its sub-commands.

    :param args: The arguments after 'config', e.g. ['set', 'FATAL_EXIT_CODE', '3'].
    :return: The process exit status.
    """
    if not args or args[0].lower() == "show":
        return _config_show()
    if args[0].lower() == "set":
        return _config_set(args[1:])
    log.error(f"Unknown config sub-command '{args[0]}'. Use 'show' or 'set'.")
    return 2


def print_help() -> int:
    print("""
Usage: keepalive [command] [--verbose]

Commands:
  run                     Supervise the configured executable forever (default).
  check-config            Validate the executable and working directory.
  config [show]           Show the modifiable settings.
  config set KEY VALUE    Persist a setting to the overrides file.
  help                    Show this message.
""")
    return 0
