class AuctionError(ValueError):
    """Base class for rejected inventory and auction operations."""


class DuplicateVehicleError(AuctionError):
    pass


class VehicleNotFoundError(AuctionError):
    pass


class ActiveAuctionConflictError(AuctionError):
    pass


class AuctionNotFoundError(AuctionError):
    """No active auction exists for the vehicle (never started or already closed)."""


class BidTooLowError(AuctionError):
    pass


class InvalidBidError(AuctionError):
    """The bid amount is not a finite number."""
