"""
Trigger vocabularies used by entry validation and moderation sweeps.

All markers are case-sensitive and match as raw substrings, so "SADLY"
triggers "SAD".
"""
from .models import Emoji

# Content forbidden on a NEGATIVE blog
POSITIVE_CONTENT_MARKERS = ("LOVE", "HAPPY", "TRUST")

# Content forbidden on a POSITIVE blog
NEGATIVE_CONTENT_MARKERS = ("SAD", "FEAR", "LONELY")

POSITIVE_EMOJI_BLOCKLIST = frozenset({Emoji.SAD.value, Emoji.ANGRY.value})
NEGATIVE_EMOJI_BLOCKLIST = frozenset({Emoji.LIKE.value, Emoji.HAHA.value})

# Only used when sweeping every blog
GLOBAL_CLEANUP_MARKERS = ("rubbish", "hell")

# Only used when sweeping a single blog
SCOPED_CLEANUP_MARKERS = ("rude", "lol", "rofl")


def find_marker(text, markers):
    """
    Return the first marker contained in text, or None.

    Args:
        text: string to search; None is treated as empty
        markers: iterable of trigger strings

    Returns:
        The matching marker string or None
    """
    if not text:
        return None
    for marker in markers:
        if marker in text:
            return marker
    return None
