"""Loads, creates and validates the user's configuration.

The configuration lives at ``~/.notes_cli/config.toml``. See :func:`load_or_initialize`.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
import logging
import os
import os.path
from pathlib import Path
import sys
from typing import Callable, Optional, Tuple
import toml


CONFIG_DIRNAME = '.notes_cli'
CONFIG_FILENAME = 'config.toml'
DEFAULT_EDITOR = 'nano'

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when an existing config file cannot be decoded or parsed, or is missing required values."""
    def __init__(self, message: str, path: str, cause: BaseException = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.cause = cause

    def __str__(self):
        if self.cause:
            return f'{self.message} ({self.path}): {self.cause}'
        return f'{self.message} ({self.path})'


class ConfigAborted(Exception):
    """Raised when the user declines to continue after a config error."""


class LoadOutcome(Enum):
    """How the config for an invocation was obtained.

    :func:`load` reports one of ``CREATED``, ``EXISTING`` or ``DEFAULTS``. A handler for a config error
    answers with ``DEFAULTS`` or ``ABORT``.
    """
    CREATED = 'created'
    EXISTING = 'existing'
    DEFAULTS = 'defaults'
    ABORT = 'abort'


@dataclass
class NotesConf:
    notes_dir: str
    """Directory holding one ``{date}.md`` file per note. Created if it does not exist."""

    editor: str = DEFAULT_EDITOR
    """Command used to open a note. It may include arguments, e.g. ``code --wait``; the note path is appended."""

    @classmethod
    def defaults(cls, config_dir: str) -> NotesConf:
        return cls(notes_dir=os.path.join(config_dir, 'notes'), editor=DEFAULT_EDITOR)

    @classmethod
    def parse(cls, text: str, path: str) -> NotesConf:
        """Parses TOML text into an instance.

        Raises :exc:`ConfigError` if the text is not valid TOML, or if ``notes_dir`` or ``editor`` is missing
        or is not a non-empty string. Unknown keys are ignored.
        """
        try:
            data = toml.loads(text)
        except toml.TomlDecodeError as e:
            raise ConfigError('Invalid TOML', path, e)
        values = {}
        for key in ('notes_dir', 'editor'):
            if key not in data:
                raise ConfigError(f'Missing required key `{key}`', path)
            value = data[key]
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f'`{key}` must be a non-empty string', path)
            values[key] = value
        return cls(**values)

    def dump(self) -> str:
        return toml.dumps({'notes_dir': self.notes_dir, 'editor': self.editor})

    def standardize(self) -> NotesConf:
        return replace(self, notes_dir=os.path.expanduser(self.notes_dir))

    def instantiate(self):
        from normalnotes.api import Notes
        return Notes(self.standardize())


def user_config_dir() -> str:
    """Returns ``~/.notes_cli``. Raises :exc:`RuntimeError` if the home directory cannot be determined."""
    return str(Path.home().joinpath(CONFIG_DIRNAME))


def ask_use_defaults(error: ConfigError) -> LoadOutcome:
    """Reports the error and asks on the terminal whether to continue with the default config."""
    print(f'Error loading nn config: {error}', file=sys.stderr)
    print('Continue with default config? [y/n]')
    try:
        answer = input()
    except EOFError:
        return LoadOutcome.ABORT
    if answer.strip().lower() in ('y', 'yes'):
        return LoadOutcome.DEFAULTS
    return LoadOutcome.ABORT


def _read(path: str) -> NotesConf:
    with open(path, 'r', encoding='utf-8') as file:
        try:
            text = file.read()
        except UnicodeDecodeError as e:
            raise ConfigError('Invalid encoding, expected UTF-8', path, e)
    return NotesConf.parse(text, path)


def load(config_dir: Optional[str] = None,
         on_error: Callable[[ConfigError], LoadOutcome] = ask_use_defaults) -> Tuple[NotesConf, LoadOutcome]:
    """Returns the user's config, and how it was obtained.

    On first run, a default config file is written and the outcome is :attr:`LoadOutcome.CREATED`.
    If the config file exists and is valid, the outcome is :attr:`LoadOutcome.EXISTING`.

    If the config file exists but cannot be read or parsed, ``on_error`` is called once with the
    :exc:`ConfigError`. When it returns :attr:`LoadOutcome.DEFAULTS`, the defaults are used for this invocation
    only and are not written to disk. When it returns :attr:`LoadOutcome.ABORT`, :exc:`ConfigAborted` is raised.

    The notes directory is created if it does not exist, whichever way the config was obtained.
    """
    if config_dir is None:
        config_dir = user_config_dir()
    path = os.path.join(config_dir, CONFIG_FILENAME)
    default = NotesConf.defaults(config_dir)

    if not os.path.exists(path):
        os.makedirs(config_dir, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as file:
            file.write(default.dump())
        conf, outcome = default, LoadOutcome.CREATED
    else:
        try:
            conf, outcome = _read(path), LoadOutcome.EXISTING
        except ConfigError as e:
            outcome = on_error(e)
            if outcome == LoadOutcome.DEFAULTS:
                conf = default
            elif outcome == LoadOutcome.ABORT:
                raise ConfigAborted(str(e)) from e
            else:
                raise ValueError(f'A config error must be answered with DEFAULTS or ABORT, not {outcome}')
    logger.debug('Config %s: %s', path, outcome.value)

    conf = conf.standardize()
    os.makedirs(conf.notes_dir, exist_ok=True)
    return conf, outcome


def load_or_initialize(config_dir: Optional[str] = None,
                       on_error: Callable[[ConfigError], LoadOutcome] = ask_use_defaults) -> NotesConf:
    """Returns the user's config, creating a default config file on first run. See :func:`load`."""
    return load(config_dir, on_error)[0]
