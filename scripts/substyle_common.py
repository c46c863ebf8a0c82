import os
import logging

from argparse import ArgumentParser, Namespace
from dataclasses import dataclass

from PySubStyle.SubtitleFormatRegistry import SubtitleFormatRegistry

log_dir = os.getenv('SUBSTYLE_LOG_DIR') or os.path.join(os.path.expanduser('~'), '.pysubstyle')

@dataclass
class LoggerOptions():
    file_handler: logging.FileHandler|None
    log_path: str

def InitLogger(logfilename: str, debug: bool = False) -> LoggerOptions:
    """ Initialise the logger with a file handler and return the path to the log file """
    log_path = os.path.join(log_dir, f"{logfilename}.log")
    file_handler = None

    if debug:
        logging_level = logging.DEBUG
    else:
        level_name = os.getenv('LOG_LEVEL', 'WARNING').upper()
        logging_level = getattr(logging, level_name, logging.WARNING)

    logging.basicConfig(format='%(levelname)s: %(message)s', encoding='utf-8', level=logging_level)

    if debug:
        logging.debug("Debug logging enabled")

    # Create file handler with the same logging level
    try:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8', mode='w')
        file_handler.setLevel(logging_level)
        file_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logging.getLogger('').addHandler(file_handler)
    except OSError as e:
        logging.warning(f"Unable to create log file at {log_path}: {e}")

    return LoggerOptions(file_handler=file_handler, log_path=log_path)

def CreateArgParser(description : str) -> ArgumentParser:
    """
    Create new arg parser with the command line arguments for inspecting subtitles
    """
    pre_parser = ArgumentParser(add_help=False)
    pre_parser.add_argument('--list-formats', action='store_true')
    pre_args, _ = pre_parser.parse_known_args()
    if pre_args.list_formats:
        HandleFormatListing(pre_args)

    parser = ArgumentParser(description=description)
    parser.add_argument('input', help="Path or URL of a subtitle file (see --list-formats for supported formats)")
    parser.add_argument('--list-formats', action='store_true', help="List supported subtitle formats and exit")
    parser.add_argument('-f', '--format', type=str, default=None, help="Hint the format of the input (e.g. .vtt) when the filename does not show it")
    parser.add_argument('--at', type=float, default=None, help="Only show the cue displayed at this time (in seconds)")
    parser.add_argument('--json', action='store_true', help="Write the cues as JSON, including styles")
    parser.add_argument('--encoding', type=str, default=None, help="Encoding to read local files with")
    parser.add_argument('--timeout', type=float, default=None, help="Timeout in seconds for downloading subtitles")
    parser.add_argument('--debug', action='store_true', help="Run with DEBUG log level")
    return parser

def HandleFormatListing(args: Namespace) -> None:
    """Print supported subtitle formats and exit if requested."""
    if getattr(args, "list_formats", False):
        formats = SubtitleFormatRegistry.list_available_formats()
        if formats:
            print(f"Supported subtitle formats: {formats}")
        else:
            print("No subtitle formats available.")
        raise SystemExit(0)

def GetSourceHint(args : Namespace) -> str:
    """
    The name to detect the format of the input from: the input itself, unless a format was given
    """
    if args.format:
        extension = args.format if args.format.startswith('.') else f".{args.format}"
        return f"input{extension.lower()}"
    return args.input
