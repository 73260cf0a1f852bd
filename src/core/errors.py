"""Error taxonomy.

Every failure is handled where it happens:
- `InputError`: reported by the CLI, the process then exits normally.
- `MissingArgumentError`: the only hard stop (movie lookup without a title).
- `ServiceError`: logged by the handler, which renders whatever it has.
- `StoredCommandError`: logged, replay aborted.
"""

from __future__ import annotations

from pathlib import Path


class LiriError(Exception):
    """Base class for every error raised by liri."""


class InputError(LiriError):
    """The command line did not name a usable command."""


class NoCommandError(InputError):
    def __init__(self) -> None:
        super().__init__("You have not specified a command!")


class UnrecognizedCommandError(InputError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"{token} is not a valid command!")


class MissingArgumentError(LiriError):
    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__("You have not supplied a name value for this command!")


class ServiceError(LiriError):
    """An external API could not produce a record."""


class TransportError(ServiceError):
    def __init__(self, service: str, detail: str) -> None:
        self.service = service
        self.detail = detail
        super().__init__(f"{service} request failed: {detail}")


class CredentialsError(ServiceError):
    def __init__(self, service: str, *names: str) -> None:
        self.service = service
        self.names = names
        super().__init__(f"{service} credentials are not configured (set {', '.join(names)})")


class StoredCommandError(LiriError):
    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Could not read stored command from {path}: {detail}")
