""" Spawn child processes for the shell. """
import logging
import os
import subprocess
import sys

log = logging.getLogger(__name__)


class ProcessRunner:
    """ Base class for process spawning. """
    def run(self, argv: list[str], cwd=None, env=None) -> int:
        """
        Run argv to completion and return its exit code.
        Raises OSError when the process cannot be spawned.
        """
        raise NotImplementedError


class SubprocessRunner(ProcessRunner):
    def run(self, argv: list[str], cwd=None, env=None) -> int:
        child_env = None
        if env:
            child_env = dict(os.environ)
            child_env.update(env)

        log.debug("spawning %s (cwd=%s)", argv, cwd)
        completed = subprocess.run(argv, cwd=cwd, env=child_env)
        return completed.returncode


def clear_screen_argv(platform=None) -> list[str]:
    platform = platform or sys.platform
    if platform.startswith("win"):
        return ["cmd", "/C", "cls"]
    return ["clear"]
