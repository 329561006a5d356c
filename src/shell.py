""" Implement the core of the shell. """
import logging
import sys

from constants import PROMPT_SUFFIX, STATUS_OK, STATUS_UNKNOWN
from exceptions import ShellExit
from lexer import tokenize
from shell_builtins import BUILTINS
from shell_state import ShellState

log = logging.getLogger(__name__)


def execute_line(line: str, state: ShellState) -> int:
    """
    Dispatch one input line against the state and return its status.
    Raises ShellExit when the line asks the shell to leave.
    """
    tokens = tokenize(line.strip())
    if not tokens:
        return STATUS_OK

    name, args = tokens[0], tokens[1:]
    func = BUILTINS.get(name)
    if func is None:
        print(f"Unknown command: {name}", file=sys.stderr)
        return STATUS_UNKNOWN

    log.debug("dispatching %s %s", name, args)
    return func(args, state) or STATUS_OK


def read_command(prompt="$ "):
    """ Read one line of input. """
    return input(prompt)


class Shell:
    def __init__(self, state=None):
        self.state = state or ShellState()

    def prompt(self):
        return f"{self.state.location}{PROMPT_SUFFIX}"

    def run(self):
        while True:
            try:
                line = read_command(self.prompt())
                execute_line(line, self.state)
            except ShellExit as e:
                return e.status

            except EOFError:
                # End of input behaves like `exit`
                print()
                return 0

            except KeyboardInterrupt:
                print()
