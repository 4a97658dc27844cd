"""Enum of the media classifications SublerCLI understands."""

import enum

from .atoms import Atom

MEDIA_KIND_TAG = "Media Kind"


class MediaKind(enum.Enum):
    """Type of media of an input file.

    Each value is the exact token SublerCLI expects.
    """

    MOVIE = "Movie"
    MUSIC = "Music"
    AUDIOBOOK = "Audiobook"
    MUSIC_VIDEO = "Music Video"
    TV_SHOW = "TV Show"
    BOOKLET = "Booklet"
    RINGTONE = "Ringtone"

    def as_atom(self) -> Atom:
        """Atom selecting this media kind."""
        return Atom(MEDIA_KIND_TAG, self.value)
