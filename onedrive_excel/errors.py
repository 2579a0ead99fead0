"""Error types raised by the workbook client."""


class StatusCodeError(Exception):
    """Error carrying an HTTP-like status code."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code
