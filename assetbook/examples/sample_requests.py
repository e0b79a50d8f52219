"""
Walk through the Assetbook API against a running server.

    python -m assetbook.examples.sample_requests

ASSETBOOK_API_BASE_URL points the script at another host (default http://localhost:8000).
"""

from __future__ import annotations

import json
import os
import urllib.request
from typing import Any, Dict, List, Optional, Tuple

BASE_URL = os.getenv("ASSETBOOK_API_BASE_URL", "http://localhost:8000").rstrip("/")

SAMPLE_CALLS: List[Tuple[str, str, Optional[Dict[str, Any]]]] = [
    ("GET", "/health", None),
    ("GET", "/categories/computers/suggest?cost=3500", None),
    ("POST", "/depreciation/straight-line", {"cost": 120000.0, "residual_value": 20000.0, "useful_life": 5}),
    (
        "POST",
        "/depreciation/declining-balance",
        {"cost": 100000.0, "residual_value": 10000.0, "useful_life": 5, "rate": 20.0},
    ),
    (
        "POST",
        "/depreciation/chart",
        {"cost": 10000.0, "residual_value": 9000.0, "useful_life": 10, "method": "declining_balance", "rate": 50.0},
    ),
    (
        "POST",
        "/assets",
        {
            "name": "Delivery Van",
            "category": "vehicles",
            "cost": 40000.0,
            "residual_value": 6000.0,
            "purchase_date": "2022-04-01",
            "useful_life": 5,
            "method": "declining_balance",
            "rate": 22.5,
        },
    ),
    (
        "POST",
        "/assets",
        {
            "name": "Head Office Fit-out",
            "category": "leasehold",
            "cost": 250000.0,
            "residual_value": 0.0,
            "purchase_date": "2021-09-15",
            "useful_life": 10,
            "method": "straight_line",
        },
    ),
    ("GET", "/assets?sort_by=cost&order=desc", None),
]


def call(method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> Tuple[int, Any]:
    data = json.dumps(payload).encode("utf-8") if payload is not None else None
    request = urllib.request.Request(
        f"{BASE_URL}{path}",
        data=data,
        headers={"Content-Type": "application/json"},
        method=method,
    )
    with urllib.request.urlopen(request) as response:  # type: ignore[no-untyped-call]
        return response.status, json.loads(response.read().decode("utf-8"))


def main() -> None:
    for method, path, payload in SAMPLE_CALLS:
        status, body = call(method, path, payload)
        print(f"{method} {path} -> {status}")
        print(json.dumps(body, indent=2)[:600])


if __name__ == "__main__":
    main()
