"""Defines classes for representing scan results, and the tag pattern."""

from dataclasses import dataclass
import re
from typing import Set


TAG_RE = re.compile(r'#\w+')


def extract_tags(text: str) -> Set[str]:
    """Returns every distinct ``#word`` token in the text, including the ``#``."""
    return set(TAG_RE.findall(text))


@dataclass
class NoteText:
    """A note file along with its full contents, as returned by searches."""

    path: str
    """Path of the file within the notes directory."""

    contents: str

    def as_json(self) -> dict:
        """Returns a dict representing the instance, suitable for serializing as json."""
        return {
            'path': self.path,
            'contents': self.contents
        }
