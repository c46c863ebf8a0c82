from urllib.parse import urlsplit

def IsUrl(source : str|None) -> bool:
    """
    Check whether a subtitle source is a URL rather than a local path
    """
    return bool(source) and '://' in source     # type: ignore[operator]

def GetSourcePath(source : str) -> str:
    """
    Get the path component of a source, discarding the query string and fragment of URLs
    """
    if IsUrl(source):
        return urlsplit(source).path
    return source

def ReadSubtitleFile(path : str, encoding : str = 'utf-8', fallback_encoding : str = 'iso-8859-1') -> str:
    """
    Read the text of a subtitle file, retrying with the fallback encoding if it cannot be decoded.
    """
    try:
        with open(path, 'r', encoding=encoding) as f:
            return f.read()
    except UnicodeDecodeError:
        with open(path, 'r', encoding=fallback_encoding) as f:
            return f.read()

def FormatNumber(value : float) -> str:
    """
    Format a number for a CSS value: whole numbers without a decimal point, otherwise the shortest round-trip form
    """
    if value == int(value):
        return str(int(value))
    return repr(float(value))
