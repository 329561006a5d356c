PROMPT_SUFFIX = " $> "

# Builtin return codes
STATUS_OK = 0
STATUS_FAILURE = 1
STATUS_USAGE = 2
STATUS_UNKNOWN = 127

HELP_TEXT = """\
Available commands:
  dir                                   List the current directory
  mkdir <directory_name>                Create a directory
  rmdir <directory_name>                Remove an empty directory
  rename <old_name> <new_name>          Rename a file or directory
  move <source> <destination>           Move a file
  copy <source> <destination>           Copy a file
  type <file_name>                      Print the contents of a file
  <-                                    Go back to the previous location
  ->                                    Go forward to the next location
  clear                                 Clear the screen
  run <script_path>                     Run a script with sh
  source <env_file_path>                Load KEY=VALUE lines into the environment
  setenv <key> <value>                  Set an environment variable
  cc create <name> <definition> <description>
  cc list
  cc delete <number>
  cc refactor <number> [definition] [description]
  help                                  Show this help
  exit                                  Leave the shell"""
