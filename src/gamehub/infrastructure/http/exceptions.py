"""Errors raised by the HTTP access layer.

Network failures are not wrapped: the ``httpx`` exception reaches the
caller as-is. Only a response outside the 2xx range is turned into an
``HttpError``.
"""


class HttpError(Exception):
    """The server answered, but not with a success status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP error! status: {status_code}")
        self.status_code = status_code
