"""Provides the main entry point for using the library, :class:`Notes`"""

from __future__ import annotations
from datetime import datetime
import logging
import os
import os.path
import shlex
import shutil
import subprocess
from typing import Callable, List, Optional
from normalnotes.conf import NotesConf, ConfigError, LoadOutcome, ask_use_defaults, load_or_initialize
from normalnotes.repos.direct import DirectRepo


DATE_FORMAT = '%Y-%m-%d'

logger = logging.getLogger(__name__)


class Error(Exception):
    pass


class Notes:
    """Main entry point for working programmatically with your notes.

    Generally, you should get an instance using the :meth:`Notes.for_user` method. Call :meth:`close` when you're
    done with it, or else use it as a context manager.

    The :attr:`repo` attribute, an instance of :class:`normalnotes.repos.base.Repo`, provides listing, deleting
    and scanning. This class adds the operations that involve the editor.

    .. attribute:: conf
       :type: normalnotes.conf.NotesConf

       Typically loaded from ``~/.notes_cli/config.toml``

    .. attribute:: repo
       :type: normalnotes.repos.base.Repo

    Here's an example that prints every note mentioning a tag:

    .. code-block:: python

       from normalnotes.api import Notes
       with Notes.for_user() as notes:
           for hit in notes.repo.search('#journal'):
               print(hit.path)
    """

    @staticmethod
    def for_user(on_error: Callable[[ConfigError], LoadOutcome] = ask_use_defaults) -> Notes:
        """Creates an instance using the user's config file, creating it on first run.

        Raises :exc:`normalnotes.conf.ConfigAborted` if the config file is invalid and ``on_error``
        chooses to abort.
        """
        return load_or_initialize(on_error=on_error).instantiate()

    def __init__(self, conf: NotesConf):
        self.conf = conf
        self.repo = DirectRepo(conf)

    def today(self) -> str:
        """Returns the current local date in ``YYYY-MM-DD`` form."""
        return datetime.now().strftime(DATE_FORMAT)

    def edit(self, date: Optional[str] = None) -> str:
        """Opens the note for the given date (default: today) in the editor, creating it first if needed.

        Blocks until the editor exits. Returns the path of the note.
        """
        path = self.repo.resolve_path(date or self.today())
        self.repo.create_if_missing(path)
        self.launch_editor(path)
        return path

    def editor_command(self) -> List[str]:
        """Returns the editor command as a list of arguments, not including the note path.

        If the configured editor names an existing file or a program on the PATH, it is used as-is, so paths
        containing spaces or backslashes work. Otherwise it is split like a shell command line, e.g. ``code --wait``.
        """
        editor = self.conf.editor
        if editor.strip() and (os.path.isfile(editor) or shutil.which(editor)):
            return [editor]
        try:
            return shlex.split(editor, posix=(os.name != 'nt'))
        except ValueError as e:
            raise Error(f'Could not parse editor command `{editor}`: {e}') from e

    def launch_editor(self, path: str) -> None:
        """Runs the configured editor on the path and waits for it to exit.

        The editor's exit status is ignored. Raises :exc:`Error` if the editor cannot be started.
        """
        command = self.editor_command()
        if not command:
            raise Error('No editor is configured')
        logger.debug('Running %s', command + [path])
        try:
            subprocess.run(command + [path])
        except OSError as e:
            raise Error(f'Could not launch editor `{self.conf.editor}`: {e}') from e

    def close(self):
        """Closes the associated repo and releases any other resources."""
        self.repo.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.repo.close()
