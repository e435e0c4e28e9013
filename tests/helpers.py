def make_wedding(
    wedding_id: str = "wedding-test", capacity: int = 1, registered: int = 0, **overrides
) -> dict:
    wedding = {
        "id": wedding_id,
        "title": "Test Couple Courthouse Wedding",
        "description": "A small ceremony for testing.",
        "date": "2099-01-01",
        "location": {
            "country": "Testland",
            "city": "Testville",
            "venue": "Town Hall",
            "coordinates": {"lat": 0.0, "lng": 0.0},
        },
        "hosts": [{"name": "Host One"}],
        "photo_url": "https://example.com/photo.jpg",
        "capacity": capacity,
        "registered": registered,
    }
    wedding.update(overrides)
    return wedding
