# server/core/errors.py


class ShopError(Exception):
    """
    Base class for errors that carry their own HTTP status.
    Raised by the stores and the upload handler, translated to a JSON
    response by the handlers registered in main.py.
    """
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ShopError):
    status_code = 400


class NotFoundError(ShopError):
    status_code = 404


class AuthenticationError(ShopError):
    status_code = 401


class UploadError(ShopError):
    status_code = 400


class FileTooLarge(UploadError):
    pass


class InvalidFileType(UploadError):
    pass
