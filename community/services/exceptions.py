"""Exceptions raised by community services."""


class AvatarUpdateError(Exception):
    """Base class for avatar upload failures that are shown to the user."""

    default_message = "Update Avatar Failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NoFileProvided(AvatarUpdateError):
    """The request carried no avatar file."""


class UnsupportedFormat(AvatarUpdateError):
    """The client-declared extension is outside the allowed set."""

    default_message = "You may only upload png, jpg or gif."

    def __init__(self, extension: str, message: str | None = None) -> None:
        self.extension = extension
        super().__init__(message)


class GithubFetchError(Exception):
    """The GitHub user API could not be reached or returned an error."""

    def __init__(self, username: str, status_code: int | None = None, detail: str = "") -> None:
        self.username = username
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"GitHub user lookup failed for {username!r}: {status_code or detail}")
