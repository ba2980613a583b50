#!/usr/bin/env python3
"""Simple e2e smoke run against a live server: create, list, update, read, delete.

Usage:
    python scripts/run_e2e_orders.py [BASE_URL]   (default http://localhost:3000)
"""
import sys

import httpx

BASE_URL = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:3000"


def run():
    with httpx.Client(base_url=BASE_URL, timeout=10.0) as client:
        print("health ->", client.get("/health").json())

        payload = {
            "customer_name": "Alice",
            "product": "Mouse",
            "quantity": 1,
            "amount": 50.00,
            "status": "pending",
            "order_date": "2026-01-01",
        }
        r = client.post("/orders", json=payload)
        print("create ->", r.status_code, r.text)
        r.raise_for_status()
        order_id = r.json()["id"]

        r = client.get("/orders", params={"status": "pending", "minAmount": 10, "maxAmount": 100})
        print("list ->", r.status_code, r.json()["pagination"])

        r = client.put(f"/orders/{order_id}", json={"status": "completed"})
        print("update ->", r.status_code, r.text)

        r = client.get(f"/orders/{order_id}")
        print("read ->", r.status_code, r.text)

        r = client.delete(f"/orders/{order_id}")
        print("delete ->", r.status_code, r.text)

        r = client.delete(f"/orders/{order_id}")
        print("delete again ->", r.status_code, r.text)


if __name__ == "__main__":
    run()
