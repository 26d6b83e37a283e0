"""Example script that sends a random-walk series to the chart server and zooms in on it."""
from __future__ import annotations

import random

import requests

BASE_URL = "http://localhost:8000"


def build_random_walk(steps: int = 300, start: float = 1000.0, seed: int = 7) -> list[dict]:
    rng = random.Random(seed)
    value = start
    data = []
    for i in range(steps):
        value = max(0.0, value + rng.uniform(-40.0, 40.0))
        data.append({"x": i, "y": round(value, 2)})
    return data


def main() -> None:
    payload = {
        "lineData": build_random_walk(),
        "margin": {"top": 10, "right": 10, "bottom": 10, "left": 10},
        "dimensions": {"width": 600, "height": 400, "point": 2, "pointsSpacing": 8},
        "startFromZero": False,
    }
    res = requests.post(f"{BASE_URL}/api/chart", json=payload, timeout=5)
    res.raise_for_status()
    print(res.json())

    # two wheel ticks towards the middle of the view, then hover there
    for _ in range(2):
        res = requests.post(
            f"{BASE_URL}/api/events/gesture",
            json={"deltaY": -120, "x": 300, "y": 200},
            timeout=5,
        )
        res.raise_for_status()
    res = requests.post(f"{BASE_URL}/api/events/pointer", json={"type": "move", "x": 300, "y": 200}, timeout=5)
    res.raise_for_status()
    print(res.json())


if __name__ == "__main__":
    main()
