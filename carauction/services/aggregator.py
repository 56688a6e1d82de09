from carauction.schemas.auction import Auction


def compute_auction_stats(auctions: list[Auction]) -> dict:
    """Compute aggregate statistics over an auction list."""
    if not auctions:
        return {}

    active = [a for a in auctions if a.is_active]
    closed = [a for a in auctions if not a.is_active]
    sold = [a for a in closed if a.bid is not None]

    bids = [a.bid for a in auctions if a.bid is not None]
    uplifts = [
        (a.bid / a.vehicle.starting_bid - 1) * 100
        for a in auctions
        if a.bid is not None and a.vehicle.starting_bid
    ]

    stats = {
        "total_auctions": len(auctions),
        "active_auctions": len(active),
        "closed_auctions": len(closed),
        "total_bids": sum(a.bid_count for a in auctions),
        "sell_through_rate": round(len(sold) / len(closed) * 100, 1) if closed else 0,
    }

    if bids:
        stats["mean_bid"] = round(sum(bids) / len(bids), 2)
        stats["median_bid"] = _median(bids)
        stats["min_bid"] = min(bids)
        stats["max_bid"] = max(bids)

    if uplifts:
        stats["mean_bid_over_start"] = round(sum(uplifts) / len(uplifts), 1)

    return stats


def _median(values: list[float]) -> float:
    s = sorted(values)
    n = len(s)
    if n % 2 == 1:
        return s[n // 2]
    return round((s[n // 2 - 1] + s[n // 2]) / 2, 2)
