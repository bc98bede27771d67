from typing import Generic, TypeVar, Optional
from pydantic import BaseModel

T = TypeVar("T")


class ResponseModel(BaseModel, Generic[T]):
    """Standard API response model"""
    code: int = 200
    data: Optional[T] = None
    msg: str = "success"
