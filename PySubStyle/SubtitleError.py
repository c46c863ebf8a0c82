class SubtitleError(Exception):
    """
    Base class for errors raised by PySubStyle.

    Carries an optional underlying exception so callers can report the root cause.
    """
    def __init__(self, message : str|None = None, error : Exception|None = None):
        super().__init__(message)
        self.message : str|None = message
        self.error : Exception|None = error

    def __str__(self) -> str:
        if self.error and self.message:
            return f"{self.message} ({self.error})"
        return self.message or str(self.error or "")


class SubtitleParseError(SubtitleError):
    """Raised when a format handler fails unexpectedly while parsing content"""
    pass


class SubtitleFetchError(SubtitleError):
    """Raised when the text of a subtitle track cannot be retrieved"""
    pass
