""" Registry of builtin commands. """
import logging
import sys

from constants import HELP_TEXT, STATUS_FAILURE, STATUS_OK, STATUS_USAGE
from custom_commands import RegistryError
from exceptions import ShellExit
from lexer import arg
from runner import clear_screen_argv

log = logging.getLogger(__name__)

BUILTINS = {}
CC_ACTIONS = {}


def builtin(name):
    """Decorator to register builtins"""
    def wrapper(func):
        BUILTINS[name] = func
        return func
    return wrapper


def cc_action(name):
    """Decorator to register `cc` sub-commands"""
    def wrapper(func):
        CC_ACTIONS[name] = func
        return func
    return wrapper


def error(message):
    print(message, file=sys.stderr)


def usage(text):
    error(f"Usage: {text}")
    return STATUS_USAGE


# -------------------------
# filesystem pass-through
# -------------------------
@builtin("dir")
def builtin_dir(args, state):
    try:
        entries = state.fs.list_dir(state.location)
    except OSError as e:
        log.debug("dir %s failed: %s", state.location, e)
        error("Failed to list directory.")
        return STATUS_FAILURE

    for name in entries:
        print(name)
    return STATUS_OK


@builtin("mkdir")
def builtin_mkdir(args, state):
    name = arg(args, 0)
    if name is None:
        return usage("mkdir <directory_name>")

    try:
        state.fs.make_dir(state.resolve(name))
    except OSError as e:
        log.debug("mkdir %s failed: %s", name, e)
        error(f"Failed to create directory: {name}")
        return STATUS_FAILURE
    return STATUS_OK


@builtin("rmdir")
def builtin_rmdir(args, state):
    name = arg(args, 0)
    if name is None:
        return usage("rmdir <directory_name>")

    try:
        state.fs.remove_dir(state.resolve(name))
    except OSError as e:
        log.debug("rmdir %s failed: %s", name, e)
        error(f"Failed to remove directory: {name}")
        return STATUS_FAILURE
    return STATUS_OK


def _two_paths(args, state, operation, usage_text, failure):
    src, dest = arg(args, 0), arg(args, 1)
    if src is None or dest is None:
        return usage(usage_text)

    try:
        operation(state.resolve(src), state.resolve(dest))
    except OSError as e:
        log.debug("%s %s -> %s failed: %s", usage_text.split()[0], src, dest, e)
        error(failure)
        return STATUS_FAILURE
    return STATUS_OK


@builtin("rename")
def builtin_rename(args, state):
    return _two_paths(args, state, state.fs.rename,
                      "rename <old_name> <new_name>", "Failed to rename directory.")


@builtin("move")
def builtin_move(args, state):
    return _two_paths(args, state, state.fs.rename,
                      "move <source> <destination>", "Failed to move file.")


@builtin("copy")
def builtin_copy(args, state):
    return _two_paths(args, state, state.fs.copy,
                      "copy <source> <destination>", "Failed to copy file.")


@builtin("type")
def builtin_type(args, state):
    name = arg(args, 0)
    if name is None:
        return usage("type <file_name>")

    try:
        contents = state.fs.read_text(state.resolve(name))
    except (OSError, UnicodeDecodeError) as e:
        log.debug("type %s failed: %s", name, e)
        error("Failed to read file.")
        return STATUS_FAILURE

    print(contents)
    return STATUS_OK


# -------------------------
# navigation and session
# -------------------------
@builtin("<-")
def builtin_back(args, state):
    state.go_backward()
    return STATUS_OK


@builtin("->")
def builtin_forward(args, state):
    state.go_forward()
    return STATUS_OK


@builtin("help")
def builtin_help(args, state):
    print(HELP_TEXT)
    return STATUS_OK


@builtin("clear")
def builtin_clear(args, state):
    try:
        state.runner.run(clear_screen_argv())
    except OSError as e:
        log.debug("clear failed: %s", e)
        error("Failed to clear screen.")
        return STATUS_FAILURE
    return STATUS_OK


@builtin("exit")
def builtin_exit(args, state):
    # Always a success status; arguments are ignored
    raise ShellExit(STATUS_OK)


# -------------------------
# processes and environment
# -------------------------
@builtin("run")
def builtin_run(args, state):
    path = arg(args, 0)
    if path is None:
        return usage("run <script_path>")

    script = state.resolve(path)
    if not state.fs.exists(script):
        error(f"Script not found: {path}")
        return STATUS_FAILURE

    # The environment overlay is not handed to the child
    try:
        rc = state.runner.run(["sh", script], cwd=state.location)
    except OSError as e:
        error(f"Failed to run script: {e}")
        return STATUS_FAILURE
    log.debug("script %s exited with %s", script, rc)
    return STATUS_OK


@builtin("source")
def builtin_source(args, state):
    path = arg(args, 0)
    if path is None:
        return usage("source <env_file_path>")

    try:
        text = state.fs.read_text(state.resolve(path))
    except (OSError, UnicodeDecodeError) as e:
        log.debug("source %s failed: %s", path, e)
        error("Failed to read env file.")
        return STATUS_FAILURE

    count = state.load_env(text)
    log.debug("sourced %d variables from %s", count, path)
    print("Environment variables sourced.")
    return STATUS_OK


@builtin("setenv")
def builtin_setenv(args, state):
    key, value = arg(args, 0), arg(args, 1)
    if key is None or value is None:
        return usage("setenv <key> <value>")

    state.set_var(key, value)
    print(f"Environment variable set: {key}={value}")
    return STATUS_OK


# -------------------------
# custom commands
# -------------------------
@builtin("cc")
def builtin_cc(args, state):
    action = arg(args, 0)
    if action is None:
        return usage("cc <create/list/delete/refactor>")

    func = CC_ACTIONS.get(action)
    if func is None:
        error(f"Unknown custom command action: {action}")
        return STATUS_FAILURE

    try:
        return func(args[1:], state)
    except RegistryError as e:
        error(str(e))
        return STATUS_FAILURE


@cc_action("create")
def cc_create(args, state):
    name, definition, description = arg(args, 0), arg(args, 1), arg(args, 2)
    if name is None or definition is None or description is None:
        return usage("cc create <command_name> <command_definition> <command_description>")

    state.registry.create(name, definition, description)
    print(f"Custom command '{name}' created.")
    return STATUS_OK


@cc_action("list")
def cc_list(args, state):
    if not len(state.registry):
        print("No custom commands defined.")
        return STATUS_OK

    for line in state.registry.lines():
        print(line)
    return STATUS_OK


@cc_action("delete")
def cc_delete(args, state):
    number = arg(args, 0)
    if number is None:
        return usage("cc delete <command_number>")

    removed = state.registry.delete(number)
    print(f"Custom command '{removed.name}' deleted.")
    return STATUS_OK


@cc_action("refactor")
def cc_refactor(args, state):
    number = arg(args, 0)
    if number is None:
        return usage("cc refactor <command_number> <new_definition> <new_description>")

    command = state.registry.refactor(number, arg(args, 1), arg(args, 2))
    print(f"Custom command '{command.name}' updated.")
    return STATUS_OK
