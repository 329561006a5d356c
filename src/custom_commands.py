""" Registry of user-defined custom commands.

Entries are addressed by their 1-based position in the registry. Positions
are not stable identifiers: deleting entry k renumbers every entry after it.
Definitions are stored verbatim and never executed.
"""

MAX_NUMBER = 2 ** 64 - 1


class RegistryError(Exception):
    """ Base class for registry validation errors. """


class InvalidNumberError(RegistryError):
    def __init__(self, text):
        super().__init__("Invalid command number.")
        self.text = text


class OutOfRangeError(RegistryError):
    def __init__(self, number):
        super().__init__("Command number out of range.")
        self.number = number


class CustomCommand:
    def __init__(self, name: str, definition: str, description: str):
        self.name = name
        self.definition = definition
        self.description = description

    def __repr__(self):
        return (f"CustomCommand(name={self.name!r}, definition={self.definition!r}, "
                f"description={self.description!r})")

    def __eq__(self, other):
        if not isinstance(other, CustomCommand):
            return NotImplemented
        return (self.name, self.definition, self.description) == \
            (other.name, other.definition, other.description)


def parse_number(text: str) -> int:
    """
    Parse a command number as an unsigned 64-bit integer: ASCII digits with
    an optional leading '+'. Anything else, including values that do not
    fit in 64 bits, is an invalid number.
    """
    digits = text[1:] if text.startswith("+") else text
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidNumberError(text)
    number = int(digits)
    if number > MAX_NUMBER:
        raise InvalidNumberError(text)
    return number


class CustomCommandRegistry:
    def __init__(self):
        self.commands = []

    def __len__(self):
        return len(self.commands)

    def __iter__(self):
        return iter(self.commands)

    def create(self, name: str, definition: str, description: str) -> CustomCommand:
        command = CustomCommand(name, definition, description)
        self.commands.append(command)
        return command

    def lines(self):
        """ Yield one display line per entry, numbered from 1. """
        for number, command in enumerate(self.commands, start=1):
            yield (f"{number}: {command.name} - {command.description} "
                   f"(Definition: {command.definition})")

    def _index(self, text: str) -> int:
        number = parse_number(text)
        if number < 1 or number > len(self.commands):
            raise OutOfRangeError(number)
        return number - 1

    def get(self, text: str) -> CustomCommand:
        return self.commands[self._index(text)]

    def delete(self, text: str) -> CustomCommand:
        return self.commands.pop(self._index(text))

    def refactor(self, text: str, definition=None, description=None) -> CustomCommand:
        """
        Overwrite the definition and/or description of an entry in place.
        The name never changes. With neither field given this is a no-op
        that still returns the entry.
        """
        command = self.get(text)
        if definition is not None:
            command.definition = definition
        if description is not None:
            command.description = description
        return command
