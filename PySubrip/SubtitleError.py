class SubtitleError(Exception):
    """
    Base class for errors raised by PySubrip.
    Optionally wraps the exception that caused it.
    """
    def __init__(self, message : str|None = None, error : Exception|None = None):
        super().__init__(message)
        self.message = message
        self.error = error

    def __str__(self) -> str:
        if self.error:
            return str(self.error)
        elif self.message:
            return self.message
        return super().__str__()

class SubtitleParseError(SubtitleError):
    """
    Raised when subtitle content does not follow the expected block structure.
    """
    def __init__(self, message : str|None = None, error : Exception|None = None, line : str|None = None, line_number : int|None = None):
        super().__init__(message, error)
        self.line = line
        self.line_number = line_number

    def __str__(self) -> str:
        if self.message:
            return self.message
        return super().__str__()

class SubtitleTimestampError(SubtitleParseError, ValueError):
    """
    Raised when a timestamp token does not match the SubRip timestamp grammar.
    """
    pass
