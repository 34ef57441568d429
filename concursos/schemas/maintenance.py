from pydantic import BaseModel


class ExpiredCounts(BaseModel):
    expired: int
    active: int
    na: int
    total: int


class ExpiredRefreshResponse(BaseModel):
    success: bool
    message: str
    counts: ExpiredCounts
