""" Exceptions shared by the shell modules. """


class ShellExit(Exception):
    """ Raised to leave the shell loop with the given status. """
    def __init__(self, status=0):
        super().__init__(status)
        self.status = status
