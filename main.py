# main.py
import json

from campus_nav.app.build import build

SAMPLE_CAMPUS = {
    "name": "sample-campus",
    "run_id": "demo",
    "locations": [
        {"id": "main", "name": "Main Building", "lat": 40.7128, "lng": -74.0060},
        {"id": "library", "name": "Library", "lat": 40.7138, "lng": -74.0070},
        {"id": "student-center", "name": "Student Center", "lat": 40.7148, "lng": -74.0050},
        {"id": "cafeteria", "name": "Cafeteria", "lat": 40.7118, "lng": -74.0040},
        {"id": "sports", "name": "Sports Complex", "lat": 40.7108, "lng": -74.0030},
    ],
    "segments": [
        {"id": "1", "fromId": "main", "toId": "library", "distance": 150, "status": "open"},
        {"id": "2", "fromId": "library", "toId": "student-center", "distance": 200, "status": "open"},
        {"id": "3", "fromId": "student-center", "toId": "cafeteria", "distance": 120, "status": "construction"},
        {"id": "4", "fromId": "cafeteria", "toId": "sports", "distance": 300, "status": "open"},
    ],
}


def run(start: str = "main", end: str = "sports"):
    app = build(SAMPLE_CAMPUS)
    engine = app.engine

    print(engine.find_shortest_path(start, end))  # None while path 3 is under construction

    # operator reopens the walkway from the admin table
    engine.set_segment_status("3", "open")
    route = engine.find_shortest_path(start, end)
    print(json.dumps(route.to_dict(), indent=2))


if __name__ == "__main__":
    run()
