from fastapi import HTTPException, status


class BaseServiceException(HTTPException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Internal server error"

    def __init__(self, detail: str | None = None):
        super().__init__(status_code=self.status_code, detail=detail or self.detail)


class BaseNotFound(BaseServiceException):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Not found"


class ErrorAuthorNotFound(BaseNotFound):
    detail = "Author not found"


class ErrorGenreNotFound(BaseNotFound):
    detail = "Genre not found"


class ErrorBookNotFound(BaseNotFound):
    detail = "Book not found"


class ErrorAuthorCreation(BaseServiceException):
    pass


class ErrorAuthorUpdate(BaseServiceException):
    pass


class ErrorAuthorDelete(BaseServiceException):
    pass


class ErrorGenreCreation(BaseServiceException):
    pass


class ErrorGenreUpdate(BaseServiceException):
    pass


class ErrorGenreDelete(BaseServiceException):
    pass


class ErrorBookCreation(BaseServiceException):
    pass


class ErrorBookUpdate(BaseServiceException):
    pass


class ErrorBookDelete(BaseServiceException):
    pass
