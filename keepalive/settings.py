"""
This module contains the configuration settings for the Keepalive supervisor.
It defines the managed executable, restart behaviour and logging configuration.
Every value can be overridden from the environment or a `.env` file.
"""

import os
import pathlib
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv(override=True)


#* --- Managed Executable ---
EXECUTABLE_PATH = pathlib.Path(os.getenv("KEEPALIVE_EXECUTABLE", "/home/minecraft/server/server"))
# Empty means "the directory containing EXECUTABLE_PATH"
WORKING_DIRECTORY = os.getenv("KEEPALIVE_WORKING_DIR", "")
# Octal, as accepted by chmod. Re-applied before every launch.
PERMISSION_MODE = int(os.getenv("KEEPALIVE_PERMISSION_MODE", "777"), 8)

#* --- Supervisor Settings ---
# Seconds to wait between a child exit and the next launch. 0 relaunches immediately.
RESTART_BACKOFF_SECONDS = float(os.getenv("KEEPALIVE_RESTART_BACKOFF", "0"))
# Exit status used when the supervisor itself fails (permission, spawn or wait fault)
FATAL_EXIT_CODE = int(os.getenv("KEEPALIVE_FATAL_EXIT_CODE", "1"))
# Printed once to stdout before the first launch so the host sees the server as started
READY_MESSAGE = os.getenv("KEEPALIVE_READY_MESSAGE", "Done (0.67s)!")
PROCESS_TITLE = "Keepalive - Supervisor"

#* --- Logging ---
LOG_LEVEL = os.getenv("KEEPALIVE_LOG_LEVEL", "INFO").upper()
LOG_FILE_PATH = os.getenv("KEEPALIVE_LOG_FILE", "")

#* --- Runtime Overrides ---
OVERRIDES_JSON_PATH = pathlib.Path(os.getenv("KEEPALIVE_OVERRIDES", "keepalive.overrides.json"))

#* --- MODIFIABLE SETTINGS (Changeable via the 'config set' command) ---
MODIFIABLE_SETTINGS = {
    "EXECUTABLE_PATH", "WORKING_DIRECTORY", "PERMISSION_MODE",
    "RESTART_BACKOFF_SECONDS", "FATAL_EXIT_CODE", "READY_MESSAGE",
    "LOG_LEVEL", "LOG_FILE_PATH",
}
