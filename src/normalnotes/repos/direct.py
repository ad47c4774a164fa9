"""Provides the :class:`DirectRepo` class."""

from collections import defaultdict
import logging
import os
import os.path
from typing import Dict, Iterator, List, Optional, Set, Tuple

from normalnotes.conf import NotesConf
from normalnotes.models import NoteText, extract_tags
from normalnotes.repos.base import Repo


logger = logging.getLogger(__name__)


class DirectRepo(Repo):
    """Accesses notes directly on the filesystem without any caching.

    Every call re-reads the directory, so results always reflect changes made by the editor
    or by other invocations.

    .. attribute:: conf
       :type: NotesConf
    """
    def __init__(self, conf: NotesConf):
        self.conf = conf
        if not conf.notes_dir:
            raise ValueError('`notes_dir` must be non-empty in NotesConf.')

    def resolve_path(self, date: str) -> str:
        return os.path.join(self.conf.notes_dir, f'{date}.md')

    def create_if_missing(self, path: str) -> bool:
        if os.path.exists(path):
            return False
        with open(path, 'w', encoding='utf-8') as file:
            file.write(f'# {os.path.basename(path)}\n\n')
        logger.debug('Created %s', path)
        return True

    def delete(self, date: str) -> bool:
        path = self.resolve_path(date)
        if not os.path.exists(path):
            return False
        os.remove(path)
        logger.debug('Removed %s', path)
        return True

    def entries(self) -> List[str]:
        with os.scandir(self.conf.notes_dir) as it:
            names = sorted(entry.name for entry in it)
        return [os.path.join(self.conf.notes_dir, name) for name in names]

    def read(self, path: str) -> Optional[str]:
        try:
            with open(path, 'r', encoding='utf-8') as file:
                return file.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug('Skipping %s: %s', path, e)
            return None

    def _texts(self) -> Iterator[Tuple[str, str]]:
        for path in self.entries():
            contents = self.read(path)
            if contents is not None:
                yield path, contents

    def search(self, query: str) -> List[NoteText]:
        return [NoteText(path, contents) for path, contents in self._texts() if query in contents]

    def tags(self) -> Set[str]:
        result = set()
        for _, contents in self._texts():
            result.update(extract_tags(contents))
        return result

    def tag_counts(self) -> Dict[str, int]:
        result = defaultdict(int)
        for _, contents in self._texts():
            for tag in extract_tags(contents):
                result[tag] += 1
        return dict(result)
