"""
hlstags - HLS Playlist Tag Parsing Toolkit

Parses and formats HTTP Live Streaming (RFC 8216) playlist tags into
immutable, typed values with canonical round-trip formatting.

Supported tags:
- EXT-X-INDEPENDENT-SEGMENTS (RFC 8216 section 4.3.5.1)
- EXT-X-START (RFC 8216 section 4.3.5.2)

Example usage:
    >>> from hlstags import ExtXStart
    >>>
    >>> tag = ExtXStart.parse("#EXT-X-START:PRECISE=YES,TIME-OFFSET=1.23")
    >>> float(tag.time_offset), tag.precise
    (1.23, True)
    >>> str(tag)
    '#EXT-X-START:TIME-OFFSET=1.23,PRECISE=YES'
"""

import logging

__version__ = "0.1.0"
__author__ = "hlstags Contributors"
__license__ = "MIT"

# Add NullHandler to prevent "No handler found" warnings
# Users should configure logging in their application if they want to see logs
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Errors
from .error import ErrorKind, HLSTagError, InvalidInputError

# Attribute values
from .attribute import parse_attribute_pairs
from .types import ProtocolVersion, SignedDecimalFloatingPoint, parse_yes_or_no

# Configuration
from .models import ParseConfig

# Tags
from .tags import ExtXIndependentSegments, ExtXStart

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",

    # Errors
    "ErrorKind",
    "HLSTagError",
    "InvalidInputError",

    # Attribute values
    "parse_attribute_pairs",
    "ProtocolVersion",
    "SignedDecimalFloatingPoint",
    "parse_yes_or_no",

    # Configuration
    "ParseConfig",

    # Tags
    "ExtXIndependentSegments",
    "ExtXStart",
]
