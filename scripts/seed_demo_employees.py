#!/usr/bin/env python
from __future__ import annotations

import argparse

import httpx


DEMO_EMPLOYEES = [
    {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
        "type": "full-time",
        "role_title": "Senior Developer",
        "salary": 90000,
        "start_date": "2023-01-09",
    },
    {
        "first_name": "Grace",
        "last_name": "Hopper",
        "email": "grace@example.com",
        "type": "full-time",
        "role_title": "Product Manager",
        "salary": 98000,
        "start_date": "2022-06-01",
    },
    {
        "first_name": "Alan",
        "last_name": "Kay",
        "email": "alan@example.com",
        "type": "part-time",
        "role_title": "UI Designer",
        "salary": 32,
        "start_date": "2024-03-18",
    },
]


def main() -> None:
    parser = argparse.ArgumentParser(description="Create demo employees against a running HR Desk API")
    parser.add_argument("--base-url", default="http://localhost:8000", help="API root, without /api")
    args = parser.parse_args()

    with httpx.Client(base_url=f"{args.base_url.rstrip('/')}/api", timeout=10.0) as client:
        roles = {role["title"]: role for role in client.get("/roles").raise_for_status().json()}
        for demo in DEMO_EMPLOYEES:
            role = roles.get(demo["role_title"])
            if role is None:
                print(f"skipping {demo['email']}: role {demo['role_title']!r} not found")
                continue
            payload = {key: value for key, value in demo.items() if key != "role_title"}
            payload.update({"role_id": role["id"], "department": role["department"]})
            response = client.post("/employees", json=payload)
            if response.status_code == 201:
                print(f"created {demo['email']} (id {response.json()['id']})")
            else:
                print(f"could not create {demo['email']}: {response.json().get('detail')}")


if __name__ == "__main__":
    main()
