# ride_share/app/demo.py
import sys
from typing import TextIO

from ride_share.app.build import App

DEMO_SCENARIO = {
    "name": "ride-sharing-demo",
    "run_id": "demo",
    "rides": {
        "r1": {"kind": "standard", "pickup": "Downtown", "dropoff": "Airport", "distance_mi": 18.4},
        "r2": {
            "kind": "premium",
            "pickup": "Mall",
            "dropoff": "University",
            "distance_mi": 7.2,
            "luxury_multiplier": 1.5,
        },
        "r3": {"kind": "standard", "pickup": "Home", "dropoff": "Office", "distance_mi": 4.5},
        "r4": {
            "kind": "premium",
            "pickup": "Hotel",
            "dropoff": "Convention Center",
            "distance_mi": 12.0,
        },
    },
    "drivers": [
        {"id": 101, "name": "Aisha Khan", "rating": 4.92, "rides": ["r1", "r3"]},
        {"id": 102, "name": "Carlos Mendez", "rating": 4.80, "rides": ["r2", "r4"]},
    ],
    "riders": [
        {"id": 201, "name": "Nabiha S.", "rides": ["r1", "r2"]},
        {"id": 202, "name": "Sam Lee", "rides": ["r3", "r4"]},
    ],
}


def run_demo(app: App, fp: TextIO | None = None) -> float:
    """Print the full demo report; return total revenue across all rides."""
    fp = fp or sys.stdout
    fleet = app.fleet
    app.logging.run_start(
        scenario=app.model.name,
        rides=len(fleet.rides_by_id),
        drivers=len(fleet.drivers),
        riders=len(fleet.riders),
    )

    print("=== Ride Sharing System Demo ===\n", file=fp)

    # every variant renders through the same call
    print("All rides (polymorphic display):", file=fp)
    for ride in fleet.rides:
        print(ride.describe(), file=fp)
    print(file=fp)

    print("---- Driver Summaries ----", file=fp)
    for d in fleet.drivers.values():
        d.report(fp)
        print(file=fp)

    print("---- Rider Histories ----", file=fp)
    for r in fleet.riders.values():
        r.report(fp)
        print(file=fp)

    revenue = fleet.total_revenue()
    print(f"Total revenue from all created rides: ${revenue:.2f}", file=fp)
    print("\n=== End Demo ===", file=fp)

    summary = fleet.fare_summary()
    app.logging.run_end(
        revenue=revenue,
        mean_fare=round(summary.mean, 2),
        max_fare=round(summary.max, 2),
        events=len(app.events.events),
        assigned=len(app.events.named("RideAssigned")),
    )
    return revenue
