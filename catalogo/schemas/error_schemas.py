from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """
    Body returned for every translated error.
    """

    detail: str
    code: str
