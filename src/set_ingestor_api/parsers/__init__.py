"""Voice transcript parsing for single workout sets."""
from .models import ParsedSetCandidate, SetParseFailure, SetParseResult
from .voice_set_parser import VoiceSetParser, parse_set_data

__all__ = [
    "ParsedSetCandidate",
    "SetParseFailure",
    "SetParseResult",
    "VoiceSetParser",
    "parse_set_data",
]
