"""
Pydantic Schemas for API Request/Response Models
"""
from datetime import datetime
from pydantic import BaseModel


class HealthCheck(BaseModel):
    """Health check response."""
    status: str
    message: str
    version: str
    database: str
    timestamp: datetime
