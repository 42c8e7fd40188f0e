from typing import Annotated, Literal

from pydantic import BaseModel, Field


class Success(BaseModel):
    outcome: Literal["success"] = "success"
    action: str
    description: str


class Rejected(BaseModel):
    outcome: Literal["rejected"] = "rejected"
    action: str
    reason: str


ActionResult = Annotated[Success | Rejected, Field(discriminator="outcome")]


class PieceResponse(BaseModel):
    kind: str
    id: int


class StateResponse(BaseModel):
    queue: list[PieceResponse]
    stack: list[PieceResponse]
