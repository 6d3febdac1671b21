"""Errors raised while reading and interpreting lexicon records."""


class LexiconError(Exception):
    """Base class for fatal lexicon errors.

    Carries the offending head word and, when the record came from a file,
    its line number so the CLI can point at the bad line.
    """

    def __init__(self, message, head_word=None, line_number=None):
        super().__init__(message)
        self.head_word = head_word
        self.line_number = line_number

    def __str__(self):
        message = super().__str__()
        if self.line_number is not None:
            return f"line {self.line_number}: {message}"
        return message


class MissingPartOfSpeech(LexiconError):
    """The record selects neither a noun nor an adjective."""


class UnknownFlag(LexiconError):
    """A flag name that is not in the option catalog."""


class MalformedFlagToken(LexiconError):
    """A flag token that is not ``name`` or ``name=value`` as the catalog expects."""


class LexiconFileError(LexiconError):
    """The lexicon file could not be opened or read."""
