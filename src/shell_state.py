""" Current state of the shell. """
import os

from custom_commands import CustomCommandRegistry
from filesystem import LocalFilesystem
from runner import SubprocessRunner


class ShellState:
    """
    Everything a session owns: the current location, the navigation
    history with its cursor, the custom command registry and the local
    environment overlay. Filesystem and process access go through the
    injected collaborators.
    """
    def __init__(self, location=None, filesystem=None, runner=None):
        location = os.path.abspath(location or os.getcwd())
        self.location = location
        self.history = [location]
        self.cursor = 0
        self.registry = CustomCommandRegistry()
        self.env_vars = {}
        self.fs = filesystem or LocalFilesystem()
        self.runner = runner or SubprocessRunner()

    def resolve(self, name: str) -> str:
        return os.path.join(self.location, name)

    # -------------------------
    # navigation history
    # -------------------------
    def visit(self, path):
        """ Append a location to the history and make it current. """
        location = os.path.abspath(os.path.join(self.location, path))
        self.history.append(location)
        self.cursor = len(self.history) - 1
        self.location = location

    def go_backward(self) -> bool:
        if self.cursor == 0:
            return False
        self.cursor -= 1
        self.location = self.history[self.cursor]
        return True

    def go_forward(self) -> bool:
        if self.cursor >= len(self.history) - 1:
            return False
        self.cursor += 1
        self.location = self.history[self.cursor]
        return True

    # -------------------------
    # environment overlay
    # -------------------------
    def set_var(self, name, value):
        self.env_vars[name] = value

    def get_var(self, name, default=None):
        # The overlay never falls back to os.environ
        return self.env_vars.get(name, default)

    def load_env(self, text: str) -> int:
        """
        Apply every KEY=VALUE line of text. Lines end at line feeds only,
        dropping one trailing carriage return. The split happens on the first
        '=' and both sides are stripped. Lines without '=' are skipped.
        """
        applied = 0
        for line in text.split("\n"):
            if line.endswith("\r"):
                line = line[:-1]
            if "=" not in line:
                continue
            key, value = line.split("=", 1)
            self.env_vars[key.strip()] = value.strip()
            applied += 1
        return applied
