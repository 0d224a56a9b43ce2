import os
import logging
from typing import Any
from .process_utils import get_mode, resolve_working_dir

log = logging.getLogger(__name__)


def check_configuration(settings: Any) -> bool:
    """
    Validates that the managed executable and its working directory exist.

    Does not change anything on disk; the supervisor applies the permission
    bits itself before each launch.

    :param settings: The merged settings object.
    :return: True if the executable can be supervised, otherwise False.
    """
    log.info("Performing configuration and path validation...")
    all_ok = True
    executable = settings.EXECUTABLE_PATH
    working_dir = resolve_working_dir(executable, settings.WORKING_DIRECTORY)

    if not executable.exists():
        log.error(f"CONFIG CHECK FAILED: executable not found at '{executable}'")
        all_ok = False
    elif not executable.is_file():
        log.error(f"CONFIG CHECK FAILED: '{executable}' is not a regular file")
        all_ok = False
    else:
        mode = get_mode(executable)
        log.info(f"Config Check OK: Found executable at '{executable}' (mode {mode:o})")
        if mode != settings.PERMISSION_MODE:
            log.info(f"Mode will be changed to {settings.PERMISSION_MODE:o} before launch.")
        if os.geteuid() not in (0, os.stat(executable).st_uid):
            log.warning(f"'{executable}' is owned by another user; changing its mode may fail.")

    if not working_dir.is_dir():
        log.error(f"CONFIG CHECK FAILED: working directory '{working_dir}' does not exist")
        all_ok = False
    else:
        log.info(f"Config Check OK: Working directory '{working_dir}'")

    if settings.RESTART_BACKOFF_SECONDS > 0:
        log.info(f"Restart backoff of {settings.RESTART_BACKOFF_SECONDS}s is enabled.")
    return all_ok
