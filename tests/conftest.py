import pytest

from carauction.schemas.vehicle import Vehicle
from carauction.services.auction_service import AuctionService
from carauction.services.inventory import AuctionInventory


@pytest.fixture
def hatchback():
    return Vehicle.hatchback(
        id=1, manufacturer="BMW", model="xpto", year=2007, starting_bid=6000, number_of_doors=5,
    )


@pytest.fixture
def sedan():
    return Vehicle.sedan(
        id=2, manufacturer="BMW", model="xpto", year=2010, starting_bid=8000, number_of_doors=5,
    )


@pytest.fixture
def inventory():
    return AuctionInventory()


@pytest.fixture
def auctions():
    return []


@pytest.fixture
def service(inventory, auctions):
    return AuctionService(inventory, auctions, currency_symbol="€")


@pytest.fixture
def stocked(service, hatchback, sedan):
    service.add_vehicle(hatchback)
    service.add_vehicle(sedan)
    return service
