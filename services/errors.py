class ValidationError(ValueError):
    """Form input rejected by a service.

    `title` is the short headline shown in the toast ("Focus Required"),
    the exception message is the longer explanation.
    """

    def __init__(self, title: str, message: str = ""):
        super().__init__(message or title)
        self.title = title
        self.message = message or title


class NotFoundError(LookupError):
    pass
