"""
Basic hlstags usage example.

Demonstrates parsing EXT-X-START and EXT-X-INDEPENDENT-SEGMENTS lines from a
playlist and writing them back in canonical form.
"""

import logging

from hlstags import ExtXIndependentSegments, ExtXStart, InvalidInputError

PLAYLIST_LINES = [
    "#EXTM3U",
    "#EXT-X-INDEPENDENT-SEGMENTS",
    "#EXT-X-START:PRECISE=YES,X-VENDOR=1,TIME-OFFSET=-12.50",
    "#EXT-X-START:TIME-OFFSET=1.5,PRECISE=MAYBE",
]

def main():
    logging.basicConfig(level=logging.DEBUG)

    for line in PLAYLIST_LINES:
        if line.startswith(ExtXStart.PREFIX):
            tag_type = ExtXStart
        elif line.startswith(ExtXIndependentSegments.PREFIX):
            tag_type = ExtXIndependentSegments
        else:
            print(f"Skipping: {line}")
            continue

        try:
            tag = tag_type.parse(line)
        except InvalidInputError as e:
            print(f"Rejected: {e}")
            continue

        print(f"Parsed:    {tag!r}")
        print(f"Canonical: {tag}")
        print(f"Requires protocol version {tag.requires_version()}")

if __name__ == "__main__":
    main()
