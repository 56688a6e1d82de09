from carauction.errors import DuplicateVehicleError
from carauction.schemas.vehicle import Vehicle


class AuctionInventory:
    """Vehicles available for auction. Mutated only through AuctionService."""

    def __init__(self, vehicles: list[Vehicle] | None = None):
        self.vehicles: list[Vehicle] = vehicles if vehicles is not None else []

        seen = set()
        for v in self.vehicles:
            if v.id in seen:
                raise DuplicateVehicleError(f"Vehicle Id: {v.id} already existis")
            seen.add(v.id)

    def get(self, vehicle_id: int) -> Vehicle | None:
        for v in self.vehicles:
            if v.id == vehicle_id:
                return v
        return None

    def __contains__(self, vehicle_id: int) -> bool:
        return self.get(vehicle_id) is not None

    def __len__(self) -> int:
        return len(self.vehicles)
