"""Exception types shared by the client, the config loader and the sync engine."""

from __future__ import annotations


class ApibuilderError(Exception):
    """Base class for all apibuilder-sync errors."""


class ConfigError(ApibuilderError):
    """The project configuration is missing or malformed."""


class NotFound(ApibuilderError):
    """The org/app/version/generator combination does not exist on the server.

    Recoverable: the planner reports it for the target and moves on.
    """

    def __init__(self, org: str, app: str, version: str, generator: str):
        self.org = org
        self.app = app
        self.version = version
        self.generator = generator
        super().__init__(f"{org}/{app}/{version}/{generator} not found")


class ServerError(ApibuilderError):
    """Any failure talking to the server other than a 404. Fatal to a run."""

    def __init__(self, message: str, status_code: int | None = None, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class FileWriteError(ApibuilderError):
    """A local directory or file could not be created, read or written.

    Reported for that one file; the rest of the run continues.
    """

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
