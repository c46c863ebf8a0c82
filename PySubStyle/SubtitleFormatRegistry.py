import importlib
import inspect
import logging
import os
import pkgutil
from pathlib import Path

import regex

from PySubStyle.Helpers import GetSourcePath
from PySubStyle.SubtitleData import SubtitleData
from PySubStyle.SubtitleFileHandler import SubtitleFileHandler

_SRT_TIMESTAMP_PATTERN = regex.compile(r'\d{2}:\d{2}:\d{2},\d{3}')

# Detection rules in order of precedence: (extensions, content signature, format)
_DETECTION_RULES : list[tuple[tuple[str, ...], str|None, str]] = [
    (('.ass', '.ssa'), '[Script Info]', '.ass'),
    (('.ytt',), '<timedtext', '.ytt'),
    (('.srv3',), '<transcript', '.srv3'),
    (('.vtt',), 'WEBVTT', '.vtt'),
    (('.srt',), None, '.srt'),
]


class SubtitleFormatRegistry:
    """
    Manages discovery and lookup of subtitle file handlers, and detection of the format of subtitle content.

    Uses lazy discovery to find all subclasses of SubtitleFileHandler in the Formats package.
    Handlers are registered by their supported file extensions and priorities.

    Provides methods to create handler instances based on file extensions or filenames.
    """
    _handlers : dict[str, type[SubtitleFileHandler]] = {}
    _priorities : dict[str, int] = {}
    _discovered : bool = False

    @classmethod
    def register_handler(cls, handler_class : type[SubtitleFileHandler]) -> None:
        """
        Register a subtitle file handler class for its supported extensions.
        """
        instance = handler_class()
        priorities = instance.get_extension_priorities()
        for ext, priority in priorities.items():
            ext = ext.lower()
            if ext not in cls._handlers or priority >= cls._priorities[ext]:
                cls._handlers[ext] = handler_class
                cls._priorities[ext] = priority

    @classmethod
    def get_handler_by_extension(cls, extension : str) -> type[SubtitleFileHandler]:
        """
        Get the subtitle file handler class for the given extension.
        """
        cls._ensure_discovered()
        ext = extension.lower()
        if ext not in cls._handlers:
            raise ValueError(f"Unknown subtitle format: {extension}. Available formats: {cls.list_available_formats()}")
        return cls._handlers[ext]

    @classmethod
    def create_handler(cls, extension : str|None = None, filename : str|None = None) -> SubtitleFileHandler:
        """
        Instantiate a subtitle file handler for the given extension.
        """
        if extension is None and filename is not None:
            extension = cls.get_format_from_filename(filename)

        if not extension:
            raise ValueError(f"Format cannot be deduced from filename or extension '{filename or extension or 'None'}'. Available formats: {cls.list_available_formats()}")

        handler_cls = cls.get_handler_by_extension(extension)
        return handler_cls()

    @classmethod
    def enumerate_formats(cls) -> list[str]:
        """
        List all supported subtitle formats (file extensions).
        """
        cls._ensure_discovered()
        return sorted(cls._handlers.keys())

    @classmethod
    def list_available_formats(cls) -> str:
        """
        Get a comma-separated string of all supported subtitle formats.
        """
        formats = cls.enumerate_formats()
        return "None" if not formats else ", ".join(formats)

    @classmethod
    def disable_autodiscovery(cls) -> None:
        """ Disable automatic discovery of subtitle formats (for testing) """
        cls.clear()
        cls._discovered = True

    @classmethod
    def enable_autodiscovery(cls) -> None:
        """ Enable automatic discovery of subtitle formats (for testing) """
        cls._discovered = False

    @classmethod
    def discover(cls) -> None:
        """
        Discover and register all subtitle file handlers in the Formats package.
        """
        package_path = Path(__file__).parent / "Formats"
        for _, module_name, _ in pkgutil.iter_modules([str(package_path)]):
            module = importlib.import_module(f"PySubStyle.Formats.{module_name}")
            for _, obj in inspect.getmembers(module, inspect.isclass):
                if issubclass(obj, SubtitleFileHandler) and obj is not SubtitleFileHandler:
                    cls.register_handler(obj)
        cls._discovered = True

    @classmethod
    def clear(cls) -> None:
        """
        Clear all registered handlers
        """
        cls._handlers.clear()
        cls._priorities.clear()
        cls._discovered = False

    @classmethod
    def get_format_from_filename(cls, filename : str|None) -> str|None:
        """
        Deduce subtitle format from the extension of a filename or URL path
        """
        if not filename:
            return None
        base, extension = os.path.splitext(GetSourcePath(filename)) # type: ignore[ignore-unused]
        return extension.lower() if extension else None

    @classmethod
    def detect_format(cls, content : str, source : str|None = None) -> str|None:
        """
        Choose the format of subtitle content from the source filename and signatures in the content.

        The first matching rule wins: ASS/SSA, YouTube timed text, SRV3, WebVTT, then SRT. Content with
        timing arrows but no other signature is SRT if it has a timestamp with a decimal comma, otherwise
        WebVTT.

        Returns:
            str|None: The format's extension, or None if the content is not recognised
        """
        extension = cls.get_format_from_filename(source)

        for extensions, signature, detected in _DETECTION_RULES:
            if extension in extensions:
                return extension
            if signature and signature in content:
                return detected

        if '-->' in content:
            return '.srt' if _SRT_TIMESTAMP_PATTERN.search(content) else '.vtt'

        return None

    @classmethod
    def parse_string(cls, content : str, source : str|None = None) -> SubtitleData:
        """
        Detect the format of subtitle content and parse it with the matching handler.

        Unrecognised content gives an empty SubtitleData.

        Raises:
            SubtitleParseError: If the handler fails unexpectedly
        """
        detected_format = cls.detect_format(content, source)
        if not detected_format:
            logging.debug(f"Subtitle format not recognised for {source or 'content'}")
            return SubtitleData()

        logging.debug(f"Detected subtitle format '{detected_format}' for {source or 'content'}")

        handler = cls.create_handler(detected_format)
        return handler.parse_string(content)

    @classmethod
    def _ensure_discovered(cls) -> None:
        if not cls._discovered:
            cls.discover()
