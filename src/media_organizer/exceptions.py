"""Exceptions for media-organizer."""


class OrganizerError(Exception):
    """Base exception for organizer errors."""

    pass


class ValidationError(OrganizerError):
    """Malformed input: invalid folder path, missing credential, bad file."""

    pass


class StateError(OrganizerError):
    """Operation requires an active project but none is set."""

    pass


class ConfigFileError(OrganizerError):
    """Error reading or writing a settings file."""

    pass
