"""Metadata atoms, the tag/value pairs SublerCLI writes into a media file.

There is a predefined set of known atom tags, each with a chainable constructor
on `Atoms`. Tags outside that set still go through `Atoms.add`; SublerCLI is the
final judge of what it accepts.
"""

import dataclasses
import enum
from collections.abc import Iterable, Iterator
from typing import Self

from .errors import ConfigurationError

METADATA_TAGS: tuple[str, ...] = (
    "Artist",
    "Album Artist",
    "Album",
    "Grouping",
    "Composer",
    "Comments",
    "Genre",
    "Release Date",
    "Track #",
    "Disk #",
    "Tempo",
    "TV Show",
    "TV Episode #",
    "TV Network",
    "TV Episode ID",
    "TV Season",
    "Description",
    "Long Description",
    "Series Description",
    "HD Video",
    "Rating Annotation",
    "Studio",
    "Cast",
    "Director",
    "Gapless",
    "Codirector",
    "Producers",
    "Screenwriters",
    "Lyrics",
    "Copyright",
    "Encoding Tool",
    "Encoded By",
    "Keywords",
    "Category",
    "contentID",
    "artistID",
    "playlistID",
    "genreID",
    "composerID",
    "XID",
    "iTunes Account",
    "iTunes Account Type",
    "iTunes Country",
    "Track Sub-Title",
    "Song Description",
    "Art Director",
    "Arranger",
    "Lyricist",
    "Acknowledgement",
    "Conductor",
    "Linear Notes",
    "Record Company",
    "Original Artist",
    "Phonogram Rights",
    "Producer",
    "Performer",
    "Publisher",
    "Sound Engineer",
    "Soloist",
    "Credits",
    "Thanks",
    "Online Extras",
    "Executive Producer",
    "Sort Name",
    "Sort Artist",
    "Sort Album Artist",
    "Sort Album",
    "Sort Composer",
    "Sort TV Show",
    "Artwork",
    "Name",
    "Rating",
    "Media Kind",
)

AtomValue = str | int | bool
MultiValue = str | Iterable[str]


@dataclasses.dataclass(frozen=True)
class Atom:
    """A single metadata atom: the name of a tag and the value it stores."""

    tag: str
    value: str

    def __post_init__(self) -> None:
        """Reject atoms that SublerCLI could never address."""
        if not self.tag:
            raise ConfigurationError("atom tag name must not be empty")

    @property
    def arg(self) -> str:
        """Atom in SublerCLI's metadata syntax, `{Tag:Value}`."""
        return f"{{{self.tag}:{self.value}}}"


def format_value(value: AtomValue | enum.Enum) -> str:
    """Render a primitive value the way SublerCLI reads it.

    Booleans are flags, written `1` or `0`. Enum members contribute their value.
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, enum.Enum):
        return str(value.value)
    return str(value)


def join_values(values: MultiValue) -> str:
    """Join a multi-value tag, like a cast list, into one comma-separated value."""
    if isinstance(values, str):
        return values
    return ",".join(values)


class Atoms:
    """Ordered, chainable collection of atoms.

    Insertion order is kept and duplicates are allowed. Calling a constructor
    twice, or mixing a named constructor with `add` for the same tag, stores
    two atoms. Nothing is merged or overwritten.

    >>> atoms = Atoms().add("Cast", "John Doe").genre("Foo,Bar").title("Foo").build()
    """

    def __init__(self, atoms: Iterable[Atom] = ()) -> None:
        """Initialize."""
        self._atoms = list(atoms)

    @staticmethod
    def metadata_tags() -> list[str]:
        """All known metadata atom tag names.

        For discovery and help text. `add` accepts tags outside this list too.
        """
        return list(METADATA_TAGS)

    def add(self, tag: str, value: AtomValue) -> Self:
        """Add an atom with an arbitrary tag name."""
        self._atoms.append(Atom(tag, format_value(value)))
        return self

    def add_atom(self, atom: Atom) -> Self:
        """Add a prebuilt atom."""
        self._atoms.append(atom)
        return self

    def build(self) -> "Atoms":
        """Snapshot the atoms added so far, independent of further changes to this builder."""
        return Atoms(self._atoms)

    @property
    def atoms(self) -> list[Atom]:
        """Copy of the stored atoms, in insertion order."""
        return list(self._atoms)

    def args(self) -> list[str]:
        """SublerCLI arguments, one `-metadata` pair per atom, in insertion order."""
        return [token for atom in self._atoms for token in ("-metadata", atom.arg)]

    def __iter__(self) -> Iterator[Atom]:
        """Iterate in insertion order."""
        return iter(self._atoms)

    def __len__(self) -> int:
        """Number of atoms, duplicates included."""
        return len(self._atoms)

    def __eq__(self, other: object) -> bool:
        """Compare by atoms and their order."""
        if not isinstance(other, Atoms):
            return NotImplemented
        return self._atoms == other._atoms

    def __repr__(self) -> str:
        """Override."""
        return f"{type(self).__name__}({self._atoms!r})"

    def artist(self, value: MultiValue) -> Self:
        """Add an `Artist` atom."""
        return self.add("Artist", join_values(value))

    def album_artist(self, value: str) -> Self:
        """Add an `Album Artist` atom."""
        return self.add("Album Artist", value)

    def album(self, value: str) -> Self:
        """Add an `Album` atom."""
        return self.add("Album", value)

    def grouping(self, value: str) -> Self:
        """Add a `Grouping` atom."""
        return self.add("Grouping", value)

    def composer(self, value: MultiValue) -> Self:
        """Add a `Composer` atom."""
        return self.add("Composer", join_values(value))

    def comments(self, value: str) -> Self:
        """Add a `Comments` atom."""
        return self.add("Comments", value)

    def genre(self, value: MultiValue) -> Self:
        """Add a `Genre` atom. Several genres are joined with commas."""
        return self.add("Genre", join_values(value))

    def release_date(self, value: str | int) -> Self:
        """Add a `Release Date` atom, e.g. `2018` or `2018-06-01`."""
        return self.add("Release Date", value)

    def track_number(self, value: str | int) -> Self:
        """Add a `Track #` atom, e.g. `3` or `3/12`."""
        return self.add("Track #", value)

    def disk_number(self, value: str | int) -> Self:
        """Add a `Disk #` atom, e.g. `1` or `1/2`."""
        return self.add("Disk #", value)

    def tempo(self, value: str | int) -> Self:
        """Add a `Tempo` atom, in BPM."""
        return self.add("Tempo", value)

    def tv_show(self, value: str) -> Self:
        """Add a `TV Show` atom."""
        return self.add("TV Show", value)

    def tv_episode_number(self, value: str | int) -> Self:
        """Add a `TV Episode #` atom."""
        return self.add("TV Episode #", value)

    def tv_network(self, value: str) -> Self:
        """Add a `TV Network` atom."""
        return self.add("TV Network", value)

    def tv_episode_id(self, value: str) -> Self:
        """Add a `TV Episode ID` atom."""
        return self.add("TV Episode ID", value)

    def tv_season(self, value: str | int) -> Self:
        """Add a `TV Season` atom."""
        return self.add("TV Season", value)

    def description(self, value: str) -> Self:
        """Add a `Description` atom."""
        return self.add("Description", value)

    def long_description(self, value: str) -> Self:
        """Add a `Long Description` atom."""
        return self.add("Long Description", value)

    def series_description(self, value: str) -> Self:
        """Add a `Series Description` atom."""
        return self.add("Series Description", value)

    def hd_video(self, value: str | bool) -> Self:
        """Add an `HD Video` atom. `True` is written as `1`."""
        return self.add("HD Video", value)

    def rating_annotation(self, value: str) -> Self:
        """Add a `Rating Annotation` atom."""
        return self.add("Rating Annotation", value)

    def studio(self, value: str) -> Self:
        """Add a `Studio` atom."""
        return self.add("Studio", value)

    def cast(self, value: MultiValue) -> Self:
        """Add a `Cast` atom. Several cast members are joined with commas."""
        return self.add("Cast", join_values(value))

    def director(self, value: MultiValue) -> Self:
        """Add a `Director` atom."""
        return self.add("Director", join_values(value))

    def gapless(self, value: str | bool) -> Self:
        """Add a `Gapless` atom. `True` is written as `1`."""
        return self.add("Gapless", value)

    def codirector(self, value: MultiValue) -> Self:
        """Add a `Codirector` atom."""
        return self.add("Codirector", join_values(value))

    def producers(self, value: MultiValue) -> Self:
        """Add a `Producers` atom."""
        return self.add("Producers", join_values(value))

    def screenwriters(self, value: MultiValue) -> Self:
        """Add a `Screenwriters` atom."""
        return self.add("Screenwriters", join_values(value))

    def lyrics(self, value: str) -> Self:
        """Add a `Lyrics` atom."""
        return self.add("Lyrics", value)

    def copyright(self, value: str) -> Self:
        """Add a `Copyright` atom."""
        return self.add("Copyright", value)

    def encoding_tool(self, value: str) -> Self:
        """Add an `Encoding Tool` atom."""
        return self.add("Encoding Tool", value)

    def encoded_by(self, value: str) -> Self:
        """Add an `Encoded By` atom."""
        return self.add("Encoded By", value)

    def keywords(self, value: MultiValue) -> Self:
        """Add a `Keywords` atom."""
        return self.add("Keywords", join_values(value))

    def category(self, value: str) -> Self:
        """Add a `Category` atom."""
        return self.add("Category", value)

    def contentid(self, value: str | int) -> Self:
        """Add a `contentID` atom."""
        return self.add("contentID", value)

    def artistid(self, value: str | int) -> Self:
        """Add an `artistID` atom."""
        return self.add("artistID", value)

    def playlistid(self, value: str | int) -> Self:
        """Add a `playlistID` atom."""
        return self.add("playlistID", value)

    def genreid(self, value: str | int) -> Self:
        """Add a `genreID` atom."""
        return self.add("genreID", value)

    def composerid(self, value: str | int) -> Self:
        """Add a `composerID` atom."""
        return self.add("composerID", value)

    def xid(self, value: str) -> Self:
        """Add an `XID` atom."""
        return self.add("XID", value)

    def itunes_account(self, value: str) -> Self:
        """Add an `iTunes Account` atom."""
        return self.add("iTunes Account", value)

    def itunes_account_type(self, value: str) -> Self:
        """Add an `iTunes Account Type` atom."""
        return self.add("iTunes Account Type", value)

    def itunes_country(self, value: str) -> Self:
        """Add an `iTunes Country` atom."""
        return self.add("iTunes Country", value)

    def track_sub_title(self, value: str) -> Self:
        """Add a `Track Sub-Title` atom."""
        return self.add("Track Sub-Title", value)

    def song_description(self, value: str) -> Self:
        """Add a `Song Description` atom."""
        return self.add("Song Description", value)

    def art_director(self, value: str) -> Self:
        """Add an `Art Director` atom."""
        return self.add("Art Director", value)

    def arranger(self, value: str) -> Self:
        """Add an `Arranger` atom."""
        return self.add("Arranger", value)

    def lyricist(self, value: str) -> Self:
        """Add a `Lyricist` atom."""
        return self.add("Lyricist", value)

    def acknowledgement(self, value: str) -> Self:
        """Add an `Acknowledgement` atom."""
        return self.add("Acknowledgement", value)

    def conductor(self, value: str) -> Self:
        """Add a `Conductor` atom."""
        return self.add("Conductor", value)

    def linear_notes(self, value: str) -> Self:
        """Add a `Linear Notes` atom."""
        return self.add("Linear Notes", value)

    def record_company(self, value: str) -> Self:
        """Add a `Record Company` atom."""
        return self.add("Record Company", value)

    def original_artist(self, value: str) -> Self:
        """Add an `Original Artist` atom."""
        return self.add("Original Artist", value)

    def phonogram_rights(self, value: str) -> Self:
        """Add a `Phonogram Rights` atom."""
        return self.add("Phonogram Rights", value)

    def producer(self, value: str) -> Self:
        """Add a `Producer` atom."""
        return self.add("Producer", value)

    def performer(self, value: str) -> Self:
        """Add a `Performer` atom."""
        return self.add("Performer", value)

    def publisher(self, value: str) -> Self:
        """Add a `Publisher` atom."""
        return self.add("Publisher", value)

    def sound_engineer(self, value: str) -> Self:
        """Add a `Sound Engineer` atom."""
        return self.add("Sound Engineer", value)

    def soloist(self, value: str) -> Self:
        """Add a `Soloist` atom."""
        return self.add("Soloist", value)

    def credits(self, value: str) -> Self:
        """Add a `Credits` atom."""
        return self.add("Credits", value)

    def thanks(self, value: str) -> Self:
        """Add a `Thanks` atom."""
        return self.add("Thanks", value)

    def online_extras(self, value: str) -> Self:
        """Add an `Online Extras` atom."""
        return self.add("Online Extras", value)

    def executive_producer(self, value: str) -> Self:
        """Add an `Executive Producer` atom."""
        return self.add("Executive Producer", value)

    def sort_name(self, value: str) -> Self:
        """Add a `Sort Name` atom."""
        return self.add("Sort Name", value)

    def sort_artist(self, value: str) -> Self:
        """Add a `Sort Artist` atom."""
        return self.add("Sort Artist", value)

    def sort_album_artist(self, value: str) -> Self:
        """Add a `Sort Album Artist` atom."""
        return self.add("Sort Album Artist", value)

    def sort_album(self, value: str) -> Self:
        """Add a `Sort Album` atom."""
        return self.add("Sort Album", value)

    def sort_composer(self, value: str) -> Self:
        """Add a `Sort Composer` atom."""
        return self.add("Sort Composer", value)

    def sort_tv_show(self, value: str) -> Self:
        """Add a `Sort TV Show` atom."""
        return self.add("Sort TV Show", value)

    def artwork(self, value: str) -> Self:
        """Add an `Artwork` atom, usually the path to an image file."""
        return self.add("Artwork", value)

    def name(self, value: str) -> Self:
        """Add a `Name` atom."""
        return self.add("Name", value)

    def title(self, value: str) -> Self:
        """Add a `Name` atom. Alias of `name`, which is what SublerCLI calls a title."""
        return self.name(value)

    def rating(self, value: str) -> Self:
        """Add a `Rating` atom."""
        return self.add("Rating", value)

    def media_kind(self, value: str | enum.Enum) -> Self:
        """Add a `Media Kind` atom.

        To set the media kind of an invocation, prefer `Subler.media_kind`,
        which is always emitted exactly once.
        """
        return self.add("Media Kind", format_value(value))
