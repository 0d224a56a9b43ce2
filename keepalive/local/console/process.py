import logging
import setproctitle
from typing import List
from keepalive.local import effective_settings as config
from keepalive.local.supervisor import ProcessSupervisor
from keepalive.local.supervisor.config_utils import check_configuration
from keepalive.local.console.handler import handle_config_command, print_help

log = logging.getLogger(__name__)


def run_supervisor() -> int:
    """Starts the supervision loop. Only returns if the fatal exit was intercepted."""
    setproctitle.setproctitle(config.PROCESS_TITLE)
    supervisor = ProcessSupervisor.from_settings(config)
    supervisor.supervision_loop()
    return supervisor.fatal_exit_code


def execute_command(command: str, args: List[str]) -> int:
    """
    Executes a single command from the user.

    :param command: The main command string (e.g., 'run', 'config').
    :param args: A list of arguments for the command.
    :return int: The process exit status.
    """
    log.debug(f"Executing command: {command}, args: {args}")
    command_map = {
        "run": run_supervisor,
        "check-config": lambda: 0 if check_configuration(config) else 1,
        "config": lambda: handle_config_command(args),
        "help": print_help,
    }

    if command in command_map:
        return command_map[command]()

    log.info(f"Unknown command: '{command}'. Type 'help' for a list of commands.")
    return 2
