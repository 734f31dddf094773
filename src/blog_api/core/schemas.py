from pydantic import BaseModel


class HealthCheck(BaseModel):
    status: str
    environment: str
    version: str | None
    timestamp: str


class ReadyCheck(BaseModel):
    status: str
    environment: str
    version: str | None
    app: str
    database: str
    redis: str
    timestamp: str
