import os
import sys
import time
import psutil
import logging
import subprocess
from pathlib import Path
from typing import Any, Callable, Optional, Union

from keepalive.local.supervisor import process_utils

log = logging.getLogger(__name__)

# Raised by the permission, launch and wait steps. Anything here is a fault of
# the supervisor itself, not of the child, and ends the process.
SUPERVISOR_FAULTS = (OSError, subprocess.SubprocessError, psutil.Error, KeyboardInterrupt)


class ProcessSupervisor:
    """
    Keeps one executable running for as long as this process lives.

    Each cycle re-applies the permission bits, starts the executable with the
    supervisor's own standard streams and blocks until it exits. Any child exit,
    clean or not, starts the next cycle. A fault in one of those steps is logged
    once at CRITICAL level and the whole process exits immediately.
    """

    def __init__(
        self,
        executable_path: Union[str, Path],
        working_dir: Optional[Union[str, Path]] = None,
        permission_mode: int = 0o777,
        restart_backoff: float = 0.0,
        fatal_exit_code: int = 1,
        ready_message: str = "",
        logger: Optional[logging.Logger] = None,
        exit_func: Optional[Callable[[int], Any]] = None,
    ) -> None:
        """
        :param executable_path: The binary to keep alive; relative paths are taken from the current directory.
        :param working_dir: Child working directory; the executable's parent when empty.
        :param permission_mode: Permission bits applied before every launch.
        :param restart_backoff: Seconds to sleep between an exit and the next launch.
        :param fatal_exit_code: Status passed to exit_func on a supervisor fault.
        :param ready_message: Line printed to stdout once, before the first launch.
        :param logger: Logger used for all supervisor records.
        :param exit_func: Called with fatal_exit_code on a supervisor fault; os._exit when None.
        """
        # chmod resolves against our cwd, exec against the child cwd or PATH; pin one file.
        self.executable_path = Path(executable_path).absolute()
        self.working_dir = process_utils.resolve_working_dir(self.executable_path, working_dir)
        self.permission_mode = permission_mode
        self.restart_backoff = restart_backoff
        self.fatal_exit_code = fatal_exit_code
        self.ready_message = ready_message
        self.log = logger or log
        self.exit_func = exit_func or os._exit

        self.launch_count = 0
        self.last_exit_code: Optional[int] = None
        self.current_proc: Optional[psutil.Popen] = None

    @classmethod
    def from_settings(cls, settings: Any = None, **kwargs: Any) -> "ProcessSupervisor":
        """
        Builds a supervisor from the merged configuration.

        :param settings: A settings object; defaults to effective_settings.
        :param kwargs: Passed through to the constructor (e.g. logger, exit_func).
        """
        if settings is None:
            from keepalive.local.config import effective_settings as settings
        return cls(
            executable_path=settings.EXECUTABLE_PATH,
            working_dir=settings.WORKING_DIRECTORY,
            permission_mode=settings.PERMISSION_MODE,
            restart_backoff=settings.RESTART_BACKOFF_SECONDS,
            fatal_exit_code=settings.FATAL_EXIT_CODE,
            ready_message=settings.READY_MESSAGE,
            **kwargs,
        )

    def announce_ready(self) -> None:
        if self.ready_message:
            print(self.ready_message, flush=True)

    def run_cycle(self) -> int:
        """
        Runs one permission, launch and wait cycle.

        :return: The child's exit status.
        :raises OSError: If the permission change or the launch fails.
        """
        process_utils.ensure_permissions(self.executable_path, self.permission_mode)
        proc = process_utils.launch_process(self.executable_path, self.working_dir)
        self.launch_count += 1
        self.current_proc = proc

        returncode = process_utils.wait_for_exit(proc)
        self.current_proc = None
        self.last_exit_code = returncode
        self.log.debug(
            f"'{self.executable_path.name}' (PID {proc.pid}) {process_utils.describe_exit(returncode)}. "
            f"Relaunching (launch #{self.launch_count + 1})."
        )
        return returncode

    def _fail(self) -> None:
        """Logs the active exception and terminates the process."""
        exc = sys.exc_info()[1]
        self.log.critical(f"Exception in supervisor runtime for '{self.executable_path}': {exc!r}", exc_info=True)
        self.exit_func(self.fatal_exit_code)

    def supervision_loop(self) -> None:
        """Relaunches the executable forever. Only returns if exit_func does."""
        self.log.info(
            f"Supervising '{self.executable_path}' (cwd '{self.working_dir}', mode {self.permission_mode:o})."
        )
        self.announce_ready()

        while True:
            try:
                self.run_cycle()
            except SUPERVISOR_FAULTS:
                self._fail()
                return

            if self.restart_backoff > 0:
                time.sleep(self.restart_backoff)
