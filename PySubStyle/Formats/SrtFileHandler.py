from PySubStyle.Formats.VttFileHandler import VttFileHandler

class SrtFileHandler(VttFileHandler):
    """
    SubRip subtitle format handler.

    SRT shares the block structure of WebVTT: the cue index line before the timing line is ignored,
    timestamps use a comma before the milliseconds and the text may contain HTML-like formatting tags.
    """

    SUPPORTED_EXTENSIONS = {'.srt': 10}
    FORMAT = '.srt'
