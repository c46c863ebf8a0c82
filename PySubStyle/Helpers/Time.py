import regex

_NUMBER_PATTERN = regex.compile(r'\d+(?:\.\d+)?|\.\d+')
_ASS_TIMESTAMP_PATTERN = regex.compile(r'(\d+):(\d{2}):(\d{2})\.(\d{2})')

def _parse_number(value : str) -> float|None:
    value = value.strip()
    if not _NUMBER_PATTERN.fullmatch(value):
        return None
    return float(value)

def ParseTimestamp(value : str|None) -> float:
    """
    Convert a WebVTT or SRT timestamp to seconds.

    Accepts hh:mm:ss.ttt, mm:ss.ttt or plain seconds, with either a comma or a dot before the fraction.
    Anything after the first whitespace (e.g. WebVTT cue settings) is ignored.
    Returns 0 if the timestamp cannot be parsed.
    """
    if not value or not value.strip():
        return 0.0

    timestamp = value.split()[0].replace(',', '.')
    parts = [ _parse_number(part) for part in timestamp.split(':') ]
    if any(part is None for part in parts):
        return 0.0

    if len(parts) == 3:
        hours, minutes, seconds = parts
        return hours * 3600 + minutes * 60 + seconds  # type: ignore[operator]
    elif len(parts) == 2:
        minutes, seconds = parts
        return minutes * 60 + seconds  # type: ignore[operator]
    elif len(parts) == 1:
        return parts[0]  # type: ignore[return-value]

    return 0.0

def ParseAssTimestamp(value : str|None) -> float:
    """
    Convert an ASS/SSA timestamp (H:MM:SS.CC, in centiseconds) to seconds.
    Returns 0 if the value does not match the format exactly.
    """
    match = _ASS_TIMESTAMP_PATTERN.fullmatch(value.strip()) if value else None
    if not match:
        return 0.0

    hours, minutes, seconds, centiseconds = (int(group) for group in match.groups())
    return hours * 3600 + minutes * 60 + seconds + centiseconds / 100

def ParseMilliseconds(value : str|None) -> float:
    """
    Convert a millisecond offset (the t and d attributes of YouTube timed text) to seconds.
    Returns 0 for non-numeric values.
    """
    number = _parse_number(value) if value else None
    if number is None:
        return 0.0
    return number / 1000
