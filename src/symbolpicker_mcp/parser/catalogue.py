"""Catalogue parsing: flat symbol lists grouped into named sections."""

from dataclasses import dataclass
from typing import Callable, Iterable, NamedTuple, Optional

from ..loader import load_resource_text

# A line starting with this marker opens a new section.
HEADER_MARKER = "## "

DEFAULT_NAME = "Symbols"


class Section(NamedTuple):
    """A named run of identifiers from a catalogue."""
    name: str
    identifiers: tuple[str, ...]


def split_lines(text: str) -> list[str]:
    """
    Split catalogue text into lines on "\\n".

    Lines are returned exactly as written: no stripping and no dropping of
    blank lines, so joining the result with "\\n" gives back the input.
    A trailing newline produces a final empty string.
    """
    if not text:
        return []
    return text.split("\n")


def is_header(line: str) -> bool:
    """Check whether a line opens a new section."""
    return line.startswith(HEADER_MARKER)


def header_name(line: str) -> str:
    """Section name carried by a header line (only the leading marker is removed)."""
    return line[len(HEADER_MARKER):].strip()


def extract_sections(lines: Iterable[str]) -> list[Section]:
    """
    Group catalogue lines into sections delimited by "## " headers.

    Lines before the first header belong to a section named "". A section
    is only emitted once it holds at least one identifier, so a header
    followed directly by another header (or by the end of input) is
    dropped. Blank lines are skipped; other lines are kept untrimmed.
    """
    sections: list[Section] = []
    current_name = ""
    current: list[str] = []

    for line in lines:
        if is_header(line):
            if current:
                sections.append(Section(current_name, tuple(current)))
            current_name = header_name(line)
            current = []
        elif line.strip():
            current.append(line)

    if current:
        sections.append(Section(current_name, tuple(current)))

    return sections


@dataclass(frozen=True)
class Catalogue:
    """Named collection of symbol identifiers, optionally grouped into sections."""
    name: str
    identifiers: tuple[str, ...]
    sections: tuple[Section, ...] = ()

    @classmethod
    def from_list(cls, identifiers: Iterable[str], name: str = DEFAULT_NAME) -> "Catalogue":
        """
        Build a catalogue from an explicit list of identifiers.

        Useful for small ad-hoc sets. No sections are extracted.
        """
        return cls(
            name=name,
            identifiers=tuple(i for i in identifiers if i),
        )

    @classmethod
    def from_text(cls, text: str, name: str = DEFAULT_NAME) -> "Catalogue":
        """Parse catalogue text into identifiers and sections."""
        identifiers = tuple(line for line in split_lines(text) if line)
        return cls(
            name=name,
            identifiers=identifiers,
            sections=tuple(extract_sections(identifiers)),
        )

    @classmethod
    def from_resource(
        cls,
        filename: str,
        name: str = DEFAULT_NAME,
        loader: Callable[[str], Optional[str]] = load_resource_text,
    ) -> "Catalogue":
        """
        Load and parse a catalogue through a resource loader.

        A loader returning None (missing or unreadable resource) gives an
        empty catalogue rather than an error.
        """
        text = loader(filename)
        return cls.from_text(text or "", name=name)

    @property
    def section_names(self) -> list[str]:
        return [s.name for s in self.sections]

    def get_section(self, name: str) -> Optional[Section]:
        """Get the first section with the given name."""
        for section in self.sections:
            if section.name == name:
                return section
        return None

    def is_empty(self) -> bool:
        return not self.identifiers
