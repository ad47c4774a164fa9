"""Handles interaction with the notes directory.

:class:`normalnotes.repos.base.Repo` defines an API.
:class:`normalnotes.repos.direct.DirectRepo` implements it by reading the filesystem on every call.
"""
