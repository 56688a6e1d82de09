from datetime import datetime, timezone

from pydantic import BaseModel, Field

from carauction.schemas.vehicle import Vehicle


class Auction(BaseModel):
    vehicle: Vehicle
    bid: float | None = Field(default=None, allow_inf_nan=False)
    is_active: bool = True
    bid_count: int = 0
    started_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    closed_at: datetime | None = None

    model_config = {"validate_assignment": True}
