"""Business rules for the vehicle inventory and its auctions.

``AuctionService`` is the only component that mutates the inventory and the
auction list. Both are handed in at construction and changed in place, so a
caller holding either one observes every accepted operation. Every check runs
before any mutation: a rejected call leaves both containers untouched.
"""

import logging
import math
from datetime import datetime, timezone

from carauction.config import settings
from carauction.errors import (
    ActiveAuctionConflictError,
    AuctionNotFoundError,
    BidTooLowError,
    DuplicateVehicleError,
    InvalidBidError,
    VehicleNotFoundError,
)
from carauction.schemas.auction import Auction
from carauction.schemas.search import SearchVehicle
from carauction.schemas.vehicle import Vehicle
from carauction.services.inventory import AuctionInventory

logger = logging.getLogger(__name__)


def format_amount(amount: float, symbol: str) -> str:
    """Render a price with its currency symbol, dropping a zero fraction."""
    if float(amount).is_integer():
        return f"{int(amount)}{symbol}"
    return f"{amount}{symbol}"


class AuctionService:
    def __init__(
        self,
        inventory: AuctionInventory,
        auctions: list[Auction],
        currency_symbol: str = settings.CURRENCY_SYMBOL,
    ):
        self.inventory = inventory
        self.auctions = auctions
        self.currency_symbol = currency_symbol

    # --- Inventory ---

    def add_vehicle(self, vehicle: Vehicle) -> None:
        if vehicle.id in self.inventory:
            logger.warning(f"Rejected vehicle {vehicle.id}: id already in inventory")
            raise DuplicateVehicleError(f"Vehicle Id: {vehicle.id} already existis")

        self.inventory.vehicles.append(vehicle)
        logger.info(
            f"Added {vehicle.vehicle_type.value} {vehicle.id} "
            f"({vehicle.manufacturer} {vehicle.model} {vehicle.year})"
        )

    def search_vehicles(self, criteria: SearchVehicle) -> list[Vehicle]:
        results = [v for v in self.inventory.vehicles if self._matches(v, criteria)]
        logger.debug(f"Search {criteria.model_dump(exclude_none=True)} matched {len(results)} vehicles")
        return results

    @staticmethod
    def _matches(vehicle: Vehicle, criteria: SearchVehicle) -> bool:
        if criteria.vehicle_type is not None and vehicle.vehicle_type is not criteria.vehicle_type:
            return False
        if criteria.manufacturer is not None and vehicle.manufacturer != criteria.manufacturer:
            return False
        if criteria.model is not None and vehicle.model != criteria.model:
            return False
        if criteria.year is not None and vehicle.year != criteria.year:
            return False
        return True

    # --- Auctions ---

    def get_active_auction(self, vehicle: Vehicle) -> Auction | None:
        for auction in self.auctions:
            if auction.is_active and auction.vehicle.id == vehicle.id:
                return auction
        return None

    def auction_history(self, vehicle: Vehicle) -> list[Auction]:
        return [a for a in self.auctions if a.vehicle.id == vehicle.id]

    def start_an_auction(self, vehicle: Vehicle) -> Auction:
        stored = self.inventory.get(vehicle.id)
        if stored is None:
            logger.warning(f"Cannot start auction: vehicle {vehicle.id} is not in the inventory")
            raise VehicleNotFoundError(f"Vehicle Id: {vehicle.id} is not in the inventory")

        if self.get_active_auction(vehicle) is not None:
            logger.warning(f"Cannot start auction: vehicle {vehicle.id} already has an active auction")
            raise ActiveAuctionConflictError(f"Vehicle Id {vehicle.id} is already in another auction.")

        auction = Auction(vehicle=stored)
        self.auctions.append(auction)
        logger.info(f"Started auction for vehicle {vehicle.id}")
        return auction

    def place_a_bid(self, vehicle: Vehicle, amount: float) -> Auction:
        auction = self._require_active(vehicle)

        if not math.isfinite(amount):
            logger.warning(f"Rejected bid {amount} on vehicle {vehicle.id}: not a finite amount")
            raise InvalidBidError(f"Bid value {amount} is not a valid amount")

        # Threshold comes from the stored vehicle, not the caller's copy
        if auction.bid is None:
            threshold, label = auction.vehicle.starting_bid, "Starting"
        else:
            threshold, label = auction.bid, "Current"

        if amount <= threshold:
            logger.warning(f"Rejected bid {amount} on vehicle {vehicle.id}: must exceed {threshold}")
            raise BidTooLowError(
                f"{label} bid value {format_amount(threshold, self.currency_symbol)} "
                f"is greater than selected bid {format_amount(amount, self.currency_symbol)}"
            )

        auction.bid = amount
        auction.bid_count += 1
        logger.info(f"Accepted bid {amount} on vehicle {vehicle.id}")
        return auction

    def close_the_auction(self, vehicle: Vehicle) -> Auction:
        auction = self._require_active(vehicle)
        auction.is_active = False
        auction.closed_at = datetime.now(timezone.utc)
        logger.info(f"Closed auction for vehicle {vehicle.id} with final bid {auction.bid}")
        return auction

    def _require_active(self, vehicle: Vehicle) -> Auction:
        auction = self.get_active_auction(vehicle)
        if auction is None:
            logger.warning(f"No active auction for vehicle {vehicle.id}")
            raise AuctionNotFoundError(f"There is no auction active for vehicle id {vehicle.id}.")
        return auction
