import json
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from scripts.substyle_common import (
    InitLogger,
    CreateArgParser,
    GetSourceHint,
)

from PySubStyle import Options, SubtitleError, get_current_cue, parse_subtitle_data
from PySubStyle.SubtitleTrackLoader import FetchSubtitleText

parser = CreateArgParser("Parses subtitles and shows the styled cues")
args = parser.parse_args()

logger_options = InitLogger("substyle", args.debug)

try:
    options = Options(default_encoding=args.encoding, fetch_timeout=args.timeout)

    content = FetchSubtitleText(args.input, options)
    data = parse_subtitle_data(content, GetSourceHint(args))

    if not data.detected_format:
        logging.error(f"Unrecognised subtitle format: {args.input}")
        sys.exit(1)

    cues = data.cues
    if args.at is not None:
        cue = get_current_cue(cues, args.at)
        cues = [ cue ] if cue else []

    if args.json:
        result = { 'format': data.detected_format, 'cues': [ cue.to_dict() for cue in cues ] }
        print(json.dumps(result, indent=2, ensure_ascii=False))
    else:
        logging.info(f"Parsed {len(data.cues)} cues ({data.detected_format})")
        for cue in cues:
            print(str(cue))

except SubtitleError as e:
    print("Error:", e)
    sys.exit(1)
