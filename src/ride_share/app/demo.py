# ride_share/app/demo.py
from ride_share.app.build import App

DEMO_SCENARIO = {
    "name": "demo",
    "run_id": "demo-1",
    "rides": [
        {
            "id": "R100",
            "tier": "standard",
            "pickup": "Station",
            "dropoff": "Mall",
            "distance_km": 4.5,
        },
        {
            "id": "R101",
            "tier": "premium",
            "pickup": "Home",
            "dropoff": "Airport",
            "distance_km": 12.0,
        },
        {
            "id": "R102",
            "tier": "standard",
            "pickup": "Office",
            "dropoff": "Gym",
            "distance_km": 3.0,
        },
    ],
    "drivers": [{"id": "D01", "name": "Asha", "rating": 4.8, "rides": ["R100", "R101"]}],
    "riders": [{"id": "U01", "name": "Rahul", "requests": ["R101", "R102"]}],
}


def render_transcript(app: App) -> str:
    out = ["=== Polymorphic ride list ===\n"]
    for ride in app.world.rides.values():
        out.append(ride.details(app.pricing))
        out.append(f"Computed fare (polymorphic): {ride.fare(app.pricing):.2f}\n\n")

    out.append("=== Driver Info ===\n")
    for d in app.world.drivers.values():
        out.append(d.info())

    out.append("\n=== Rider View Rides ===\n")
    for r in app.world.riders.values():
        out.append(r.view_rides(app.pricing))
    return "".join(out)
