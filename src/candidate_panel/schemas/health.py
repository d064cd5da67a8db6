from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    candidates: int
    version: str


class StatusResponse(BaseModel):
    status: str
