"""Request errors that map onto an HTTP status and a user-facing message."""


class TokenPlotError(Exception):
    status_code = 500
    message = "Something went wrong."

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class MissingInputError(TokenPlotError):
    """No sentence was submitted."""

    status_code = 400
    message = "Please enter a sentence to tokenize."


class EmptyTokenSequenceError(TokenPlotError):
    """The sentence contained no word tokens, so there is nothing to average."""

    status_code = 422
    message = "The sentence has no word tokens (only spaces or punctuation)."
