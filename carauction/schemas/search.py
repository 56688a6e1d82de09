from pydantic import BaseModel

from carauction.schemas.vehicle import VehicleType


class SearchVehicle(BaseModel):
    """Search criteria; fields left as None match any vehicle."""

    vehicle_type: VehicleType | None = None
    manufacturer: str | None = None
    model: str | None = None
    year: int | None = None
