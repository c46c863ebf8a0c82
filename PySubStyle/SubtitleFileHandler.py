import os
from abc import ABC, abstractmethod
from typing import TextIO

from PySubStyle.Helpers import ReadSubtitleFile
from PySubStyle.SubtitleData import SubtitleData
from PySubStyle.SubtitleError import SubtitleParseError

default_encoding = os.getenv('DEFAULT_ENCODING', 'utf-8')
fallback_encoding = os.getenv('FALLBACK_ENCODING', 'iso-8859-1')

class SubtitleFileHandler(ABC):
    """
    Abstract interface for parsing subtitle documents.

    Implementations turn the text of one format into styled cues. Malformed content never raises:
    unreadable blocks are skipped and unparsable values take documented defaults. Unexpected failures
    are wrapped in SubtitleParseError.
    """

    SUPPORTED_EXTENSIONS : dict[str, int] = {}

    @abstractmethod
    def parse_string(self, content : str) -> SubtitleData:
        """
        Parse subtitle string content and return cues with file-level metadata.

        Args:
            content: String content to parse

        Returns:
            SubtitleData: Container with parsed cues and file metadata

        Raises:
            SubtitleParseError: If the handler fails unexpectedly
        """
        pass

    def parse_file(self, file_obj : TextIO) -> SubtitleData:
        """
        Parse the content of an open file.
        """
        try:
            content = file_obj.read()
        except UnicodeDecodeError:
            raise  # Re-raise UnicodeDecodeError for fallback handling
        except Exception as e:
            raise SubtitleParseError(f"Failed to read file: {e}", e)

        return self.parse_string(content)

    def load_file(self, path : str, encoding : str|None = None, fallback : str|None = None) -> SubtitleData:
        """
        Read and parse a subtitle file, retrying with the fallback encoding if it cannot be decoded.
        """
        content = ReadSubtitleFile(path, encoding or default_encoding, fallback or fallback_encoding)
        return self.parse_string(content)

    def get_file_extensions(self) -> list[str]:
        """
        Get file extensions supported by this handler.

        Returns:
            list[str]: List of file extensions (e.g., ['.srt'])
        """
        return list(self.__class__.SUPPORTED_EXTENSIONS.keys())

    def get_extension_priorities(self) -> dict[str, int]:
        """
        Get priority for each supported extension.
        Higher priority handlers override lower priority ones.

        Returns:
            dict[str, int]: Mapping of extensions to priorities
        """
        return self.__class__.SUPPORTED_EXTENSIONS.copy()
