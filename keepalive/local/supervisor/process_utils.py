import os
import stat
import signal
import psutil
import logging
from pathlib import Path
from typing import Optional, Union

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


#* --- Filesystem ---
def get_mode(path: PathLike) -> int:
    """Returns the permission bits of a file (e.g. 0o755)."""
    return stat.S_IMODE(os.stat(path).st_mode)

def ensure_permissions(path: PathLike, mode: int) -> None:
    """
    Sets the permission bits of the executable, whatever they currently are.

    :param path: The executable to update.
    :param mode: The target bits, e.g. 0o777.
    :raises OSError: If the file is missing or the change is not permitted.
    """
    os.chmod(path, mode)
    log.debug(f"Permissions of '{path}' set to {mode:o}")

def resolve_working_dir(executable: PathLike, working_dir: Optional[PathLike] = None) -> Path:
    """Returns the configured working directory, or the executable's parent when unset."""
    if working_dir:
        return Path(working_dir)
    return Path(executable).parent


#* --- Process Creation ---
def launch_process(executable: PathLike, cwd: PathLike) -> psutil.Popen:
    """
    Starts the executable as a child process.

    No stdin/stdout/stderr arguments are given, so the child inherits the
    supervisor's own streams.

    :raises OSError: If the executable cannot be started.
    :raises subprocess.SubprocessError: If the child setup fails before exec.
    """
    proc = psutil.Popen([str(executable)], cwd=str(cwd))
    log.debug(f"Started '{executable}' with PID {proc.pid} in '{cwd}'")
    return proc

def wait_for_exit(proc: psutil.Popen) -> int:
    """Blocks until the child terminates and returns its exit status."""
    return proc.wait()

def describe_exit(returncode: int) -> str:
    """Human readable exit status; negative codes are signals on POSIX."""
    if returncode < 0:
        try:
            return f"killed by {signal.Signals(-returncode).name}"
        except ValueError:
            return f"killed by signal {-returncode}"
    return f"exited with status {returncode}"
