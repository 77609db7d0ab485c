#!/usr/bin/env python3
"""Benchmark permission resolution over HTTP: latency of summary and access checks.

Usage:
  export API_URL=http://localhost:8000 KEYCLOAK_URL=http://localhost:8080
  export KEYCLOAK_REALM=pmguard KEYCLOAK_CLIENT_ID=pmguard-api KEYCLOAK_CLIENT_SECRET=pmguard-api-secret
  export BENCH_USER=testuser BENCH_PASSWORD=testpass
  uv run python scripts/bench_resolve.py [--requests 200] [--entity-type sites --entity-id site-1]
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time

import httpx


def get_token(
    keycloak_url: str,
    realm: str,
    client_id: str,
    client_secret: str,
    username: str,
    password: str,
) -> str:
    url = f"{keycloak_url.rstrip('/')}/realms/{realm}/protocol/openid-connect/token"
    r = httpx.post(
        url,
        data={
            "grant_type": "password",
            "client_id": client_id,
            "client_secret": client_secret,
            "username": username,
            "password": password,
        },
        headers={"Content-Type": "application/x-www-form-urlencoded"},
        timeout=30.0,
    )
    r.raise_for_status()
    return r.json()["access_token"]


def percentile(latencies: list[float], q: float) -> float:
    ordered = sorted(latencies)
    return ordered[max(int(len(ordered) * q) - 1, 0)] * 1000


def run(client: httpx.Client, method: str, url: str, n: int, **kwargs) -> tuple[list[float], int]:
    latencies: list[float] = []
    errors = 0
    for _ in range(n):
        t0 = time.perf_counter()
        r = client.request(method, url, **kwargs)
        elapsed = time.perf_counter() - t0
        if r.status_code == 200:
            latencies.append(elapsed)
        else:
            errors += 1
    return latencies, errors


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark permission resolution")
    parser.add_argument("--requests", type=int, default=100, help="Requests per endpoint")
    parser.add_argument("--entity-type", type=str, default="projects", help="Resource kind for access checks")
    parser.add_argument("--entity-id", type=str, default=None, help="Optional resource id")
    parser.add_argument("--action", type=str, default="update", help="Action for access checks")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    keycloak_url = os.environ.get("KEYCLOAK_URL", "http://localhost:8080")
    realm = os.environ.get("KEYCLOAK_REALM", "pmguard")
    client_id = os.environ.get("KEYCLOAK_CLIENT_ID", "pmguard-api")
    client_secret = os.environ.get("KEYCLOAK_CLIENT_SECRET", "pmguard-api-secret")
    user = os.environ.get("BENCH_USER", "testuser")
    password = os.environ.get("BENCH_PASSWORD", "testpass")

    print("Getting token...")
    token = get_token(keycloak_url, realm, client_id, client_secret, user, password)
    headers = {"Authorization": f"Bearer {token}"}

    check_body = {"entity_type": args.entity_type, "action": args.action}
    if args.entity_id:
        check_body["entity_id"] = args.entity_id

    with httpx.Client(timeout=30.0, headers=headers) as client:
        results = {
            "summary": run(client, "GET", f"{api_url}/v1/permissions", args.requests),
            "access-check": run(
                client, "POST", f"{api_url}/v1/access-checks", args.requests, json=check_body
            ),
        }

    for name, (latencies, errors) in results.items():
        if not latencies:
            print(f"{name}: no successful requests ({errors} errors)")
            return 1
        print(
            f"{name} (n={len(latencies)}, errors={errors}): "
            f"p50={statistics.median(latencies) * 1000:.1f} ms, "
            f"p95={percentile(latencies, 0.95):.1f} ms, "
            f"p99={percentile(latencies, 0.99):.1f} ms"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
