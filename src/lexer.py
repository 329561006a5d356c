""" Lexical analysis for shell commands. """
import shlex


def tokenize(line: str) -> list[str]:
    """
    Split a line on runs of whitespace. Double or single quotes group
    words into one token; a line with an unbalanced quote is split on
    whitespace only.
    """
    lex = shlex.shlex(line, posix=True)
    lex.whitespace_split = True
    lex.commenters = ""
    # Backslashes are ordinary characters (Windows paths)
    lex.escape = ""
    try:
        return list(lex)
    except ValueError:
        return line.split()


def arg(tokens: list[str], index: int) -> str | None:
    """ Return the positional token at index, or None when absent. """
    if 0 <= index < len(tokens):
        return tokens[index]
    return None
