"""
Media-or-master playlist tags (RFC 8216 section 4.3.5).

Implements parsing and canonical formatting for:
- EXT-X-INDEPENDENT-SEGMENTS (section 4.3.5.1)
- EXT-X-START (section 4.3.5.2)
"""

import logging
from dataclasses import dataclass
from typing import Optional, Set, Union

from .attribute import parse_attribute_pairs
from .error import HLSTagError, InvalidInputError
from .models import ParseConfig
from .types import ProtocolVersion, SignedDecimalFloatingPoint, parse_yes_or_no

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtXIndependentSegments:
    """
    EXT-X-INDEPENDENT-SEGMENTS tag.

    Marks that every media sample in a segment can be decoded without
    information from other segments. The tag has no attributes, so all
    instances are equal.
    """
    PREFIX = "#EXT-X-INDEPENDENT-SEGMENTS"

    @classmethod
    def parse(cls, text: str, config: Optional[ParseConfig] = None) -> "ExtXIndependentSegments":
        """
        Parse an EXT-X-INDEPENDENT-SEGMENTS tag line.

        The line must match the tag literally; trailing colons, attributes
        or whitespace are rejected.

        Raises:
            InvalidInputError: If the line is not exactly the tag
        """
        if text != cls.PREFIX:
            logger.debug(f"Rejected EXT-X-INDEPENDENT-SEGMENTS line: {text!r}")
            raise InvalidInputError(f"Expected {cls.PREFIX!r}, got {text!r}")
        return cls()

    def format(self) -> str:
        return self.PREFIX

    def requires_version(self) -> ProtocolVersion:
        """Return the protocol compatibility version that this tag requires."""
        return ProtocolVersion.V1

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class ExtXStart:
    """
    EXT-X-START tag.

    Indicates a preferred point at which to start playing a playlist.

    Attributes:
        time_offset: Offset in seconds from the start (positive) or the end
            (negative) of the playlist
        precise: Whether clients should skip media samples that precede the
            time offset
    """
    time_offset: SignedDecimalFloatingPoint
    precise: bool = False

    PREFIX = "#EXT-X-START:"

    def __post_init__(self):
        if not isinstance(self.time_offset, SignedDecimalFloatingPoint):
            object.__setattr__(self, "time_offset", SignedDecimalFloatingPoint(self.time_offset))

    @classmethod
    def new(cls, time_offset: Union[SignedDecimalFloatingPoint, float]) -> "ExtXStart":
        """Make a new tag with ``precise`` unset."""
        return cls(time_offset)

    @classmethod
    def with_precise(
        cls,
        time_offset: Union[SignedDecimalFloatingPoint, float],
        precise: bool
    ) -> "ExtXStart":
        """Make a new tag with the given ``precise`` flag."""
        return cls(time_offset, precise)

    @classmethod
    def parse(cls, text: str, config: Optional[ParseConfig] = None) -> "ExtXStart":
        """
        Parse an EXT-X-START tag line.

        Attributes may appear in any order. Unrecognized attributes are
        ignored as required by RFC 8216 section 6.3.1. When a recognized
        attribute is repeated, the last value wins unless the config asks
        for duplicates to be rejected.

        Args:
            text: Tag line, e.g. ``#EXT-X-START:TIME-OFFSET=1.23,PRECISE=YES``
            config: Parse options (defaults to ``ParseConfig()``)

        Returns:
            Parsed tag

        Raises:
            InvalidInputError: If the prefix does not match, TIME-OFFSET is
                missing, a recognized value is malformed or the attribute
                list is malformed

        Example:
            >>> ExtXStart.parse("#EXT-X-START:PRECISE=YES,TIME-OFFSET=1.23")
            ExtXStart(time_offset=SignedDecimalFloatingPoint(value=1.23), precise=True)
        """
        config = config or ParseConfig()

        if not text.startswith(cls.PREFIX):
            logger.debug(f"Rejected EXT-X-START line: {text!r}")
            raise InvalidInputError(f"Expected {cls.PREFIX!r} prefix, got {text!r}")

        time_offset = None
        precise = False
        seen: Set[str] = set()

        try:
            for name, value in parse_attribute_pairs(text[len(cls.PREFIX):]):
                if name == "TIME-OFFSET":
                    cls._check_duplicate(name, seen, config)
                    time_offset = SignedDecimalFloatingPoint.parse(value)
                elif name == "PRECISE":
                    cls._check_duplicate(name, seen, config)
                    precise = parse_yes_or_no(value)
                else:
                    logger.debug(f"Ignoring unrecognized EXT-X-START attribute: {name}")
        except HLSTagError as e:
            logger.debug(f"Rejected EXT-X-START line: {text!r}")
            raise e.track(f"parsing {text!r}")

        if time_offset is None:
            logger.debug(f"Rejected EXT-X-START line: {text!r}")
            raise InvalidInputError(f"Missing required attribute TIME-OFFSET in {text!r}")

        return cls(time_offset, precise)

    @staticmethod
    def _check_duplicate(name: str, seen: Set[str], config: ParseConfig) -> None:
        if name in seen:
            if config.reject_duplicate_attributes:
                raise InvalidInputError(f"Duplicate attribute: {name}")
            logger.debug(f"Duplicate EXT-X-START attribute {name}, using last value")
        seen.add(name)

    def format(self) -> str:
        line = f"{self.PREFIX}TIME-OFFSET={self.time_offset}"
        if self.precise:
            line += ",PRECISE=YES"
        return line

    def requires_version(self) -> ProtocolVersion:
        """Return the protocol compatibility version that this tag requires."""
        return ProtocolVersion.V1

    def __str__(self) -> str:
        return self.format()
