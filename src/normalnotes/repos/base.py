"""Defines the API for accessing a user's notes directory.

The most important class is :class:`Repo`.
"""

from typing import Dict, List, Optional, Set

from normalnotes.models import NoteText


class Repo:
    """Base class for repos, which are responsible for reading, scanning, and changing a user's notes.

    Notes are identified only by a date string; each one is backed by a ``{date}.md`` file.
    """
    def resolve_path(self, date: str) -> str:
        """Returns the path of the note for the given date. The date is not validated or normalized."""
        raise NotImplementedError()

    def create_if_missing(self, path: str) -> bool:
        """Creates the file with a heading line if nothing exists at the path.

        Returns True if the file was created. An existing file is left untouched.
        """
        raise NotImplementedError()

    def delete(self, date: str) -> bool:
        """Deletes the note for the given date. Returns False, without raising, if there is no such note."""
        raise NotImplementedError()

    def entries(self) -> List[str]:
        """Returns the paths of everything directly inside the notes directory, sorted by name."""
        raise NotImplementedError()

    def read(self, path: str) -> Optional[str]:
        """Returns the contents of the file, or None if it cannot be read as text."""
        raise NotImplementedError()

    def search(self, query: str) -> List[NoteText]:
        """Returns all readable files whose contents contain the query (case-sensitive, not a pattern)."""
        raise NotImplementedError()

    def tags(self) -> Set[str]:
        """Returns every distinct tag found in any readable file."""
        raise NotImplementedError()

    def tag_counts(self) -> Dict[str, int]:
        """Returns a map of tags to the number of files containing each tag."""
        raise NotImplementedError()

    def close(self) -> None:
        """Release any resources associated with the repo. Should be called when you're done with an instance."""
        pass
