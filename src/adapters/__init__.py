"""Adapters: pure I/O (HTTP APIs, log file, stored-command file)."""

from adapters.log_file import append_log_entry
from adapters.omdb import OmdbClient
from adapters.spotify import SpotifyClient
from adapters.stored_command import parse_stored_command, read_stored_command
from adapters.twitter import TwitterClient

__all__ = [
    "OmdbClient",
    "SpotifyClient",
    "TwitterClient",
    "append_log_entry",
    "parse_stored_command",
    "read_stored_command",
]
