"""Prometheus metrics for the parking garage."""

from prometheus_client import Counter, Gauge, Histogram, CollectorRegistry, generate_latest

# Create a custom registry to avoid conflicts with default metrics
REGISTRY = CollectorRegistry()

# Successful park-ins by floor
PARK_INS = Counter(
    "parkhaus_park_ins_total",
    "Total number of successful park-ins",
    ["floor"],
    registry=REGISTRY,
)

# Rejected park-ins by validation failure
PARK_IN_REJECTIONS = Counter(
    "parkhaus_park_in_rejections_total",
    "Total number of rejected park-ins",
    ["reason"],
    registry=REGISTRY,
)

PARK_OUTS = Counter(
    "parkhaus_park_outs_total",
    "Total number of park-outs",
    ["floor"],
    registry=REGISTRY,
)

# Fee charged on park-out (currency units)
PARKING_FEES = Histogram(
    "parkhaus_parking_fee",
    "Fee charged per park-out",
    buckets=(0.5, 1.0, 2.5, 5.0, 10.0, 25.0, 50.0, 100.0, 250.0),
    registry=REGISTRY,
)

# Billed parking duration in minutes
PARKING_MINUTES = Histogram(
    "parkhaus_parking_minutes",
    "Billed parking duration per park-out in minutes",
    buckets=(1, 5, 15, 30, 60, 120, 240, 480, 1440),
    registry=REGISTRY,
)

# Current occupancy per floor
FLOOR_OCCUPIED = Gauge(
    "parkhaus_floor_slots_occupied",
    "Number of occupied slots per floor",
    ["floor"],
    registry=REGISTRY,
)

TOTAL_SLOTS = Gauge(
    "parkhaus_slots_total",
    "Total number of parking slots",
    registry=REGISTRY,
)

FREE_SLOTS = Gauge(
    "parkhaus_slots_free",
    "Number of free parking slots",
    registry=REGISTRY,
)

OCCUPIED_SLOTS = Gauge(
    "parkhaus_slots_occupied",
    "Number of occupied parking slots",
    registry=REGISTRY,
)


def record_park_in(floor: str) -> None:
    """Record a successful park-in."""
    PARK_INS.labels(floor=floor).inc()


def record_park_in_rejection(reason: str) -> None:
    """Record a rejected park-in."""
    PARK_IN_REJECTIONS.labels(reason=reason).inc()


def record_park_out(floor: str, fee: float, minutes: int) -> None:
    """Record a park-out with its fee and billed minutes."""
    PARK_OUTS.labels(floor=floor).inc()
    PARKING_FEES.observe(fee)
    PARKING_MINUTES.observe(minutes)


def update_floor_occupancy(floor: str, occupied: int) -> None:
    """Update occupied slot gauge for a floor."""
    FLOOR_OCCUPIED.labels(floor=floor).set(occupied)


def reset_floor_occupancy() -> None:
    """Drop per-floor gauges, e.g. for floors of a previous layout."""
    FLOOR_OCCUPIED.clear()


def update_slot_counts(total: int, free: int, occupied: int) -> None:
    """Update overall slot count gauges."""
    TOTAL_SLOTS.set(total)
    FREE_SLOTS.set(free)
    OCCUPIED_SLOTS.set(occupied)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest(REGISTRY)
