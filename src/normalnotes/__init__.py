"""Manages a directory of date-named Markdown notes.

If you installed via ``pip``, run ``nn -h`` to get help.
Or, run ``python3 -m normalnotes -h``.

To use the Python API, look at :class:`normalnotes.api.Notes`
"""

__version__ = '0.1.0'
