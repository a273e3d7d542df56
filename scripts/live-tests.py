#!/usr/bin/env python3
# This project was developed with assistance from AI tools.
"""Live smoke tests for the SavantFS website API.

Validates the public endpoints, the repayment calculator, error responses
and (optionally) real enquiry dispatch against a running server instance.

Prerequisites:
  - API server running on localhost:8000 (uvicorn savantfs.main:app)
  - SMTP_* settings configured on the server when using --send

Usage:
  ./scripts/live-tests.py                      # everything except real email
  ./scripts/live-tests.py --send               # also POST a real enquiry
  ./scripts/live-tests.py --base http://host:8000
"""

import argparse
import asyncio
import sys

import httpx

BASE = "http://localhost:8000"
HEADERS = {"Origin": "http://localhost:3000"}

# ---------------------------------------------------------------------------
# Test runner
# ---------------------------------------------------------------------------

PASS = 0
FAIL = 0
ERRORS: list[str] = []
SECTION = ""


def section(name: str):
    global SECTION
    SECTION = name
    print(f"\n{'=' * 60}")
    print(f"  {name}")
    print(f"{'=' * 60}\n")


def ok(name: str, passed: bool, detail: str = ""):
    global PASS, FAIL
    if passed:
        PASS += 1
        print(f"  PASS  {name}")
    else:
        FAIL += 1
        msg = f"[{SECTION}] {name}: {detail}" if detail else f"[{SECTION}] {name}"
        ERRORS.append(msg)
        print(f"  FAIL  {name} -- {detail}")


def has_keys(d: dict, *keys: str) -> bool:
    return all(k in d for k in keys)


# ---------------------------------------------------------------------------
# 1. Health
# ---------------------------------------------------------------------------

async def test_health(c: httpx.AsyncClient):
    section("Health")

    r = await c.get("/health/")
    ok("GET /health/ returns 200", r.status_code == 200)
    data = r.json()
    ok("response is a list", isinstance(data, list))
    ok("API status is healthy",
       any(s.get("name") == "API" and s.get("status") == "healthy" for s in data))
    mail = next((s for s in data if s.get("name") == "Mail relay"), {})
    ok("mail relay reported", bool(mail))
    if mail.get("status") != "healthy":
        print(f"  NOTE  mail relay is {mail.get('status')}: {mail.get('message')}")

    r = await c.get("/")
    ok("GET / root returns 200", r.status_code == 200)


# ---------------------------------------------------------------------------
# 2. Public API -- services & calculator
# ---------------------------------------------------------------------------

async def test_public_api(c: httpx.AsyncClient):
    section("Public API")

    r = await c.get("/api/public/services")
    ok("GET /api/public/services returns 200", r.status_code == 200)
    services = r.json()
    ok("services is non-empty list", isinstance(services, list) and len(services) > 0)
    if services:
        ok("service has title and description", has_keys(services[0], "title", "description"))

    r = await c.get("/api/public/enquiry-options")
    ok("GET enquiry-options returns 200", r.status_code == 200)
    opts = r.json()
    ok("enquiry options include Other", "Other" in opts.get("options", []))
    ok("default is one of the options", opts.get("default") in opts.get("options", []))

    r = await c.get("/api/public/calculator")
    ok("GET calculator config returns 200", r.status_code == 200)
    cfg = r.json()
    ok("config has all three inputs",
       has_keys(cfg, "principal", "annual_rate_percent", "term_years", "default_quote"))

    payload = {"principal": 600000, "annual_rate_percent": 6.2, "term_years": 30}
    r = await c.post("/api/public/calculate-repayment", json=payload)
    ok("POST calculate-repayment returns 200", r.status_code == 200)
    body = r.json()
    ok("reference repayment is ~3,675", 3674 < body.get("monthly_repayment", 0) < 3676,
       f"got {body.get('monthly_repayment')}")
    ok("display has two decimals",
       len(body.get("monthly_repayment_display", "").split(".")[-1]) == 2)

    r = await c.post("/api/public/calculate-repayment", json={"term_years": 0})
    ok("term 0 returns 422", r.status_code == 422)
    ok("422 is problem details", r.json().get("status") == 422)


# ---------------------------------------------------------------------------
# 3. Contact endpoint
# ---------------------------------------------------------------------------

async def test_contact(c: httpx.AsyncClient, send: bool):
    section("Contact")

    r = await c.post("/api/contact", content=b"{broken",
                     headers={"Content-Type": "application/json"})
    ok("malformed body returns 500", r.status_code == 500)
    ok("failure body is generic",
       r.json() == {"ok": False, "error": "Failed to send email"}, r.text)

    if not send:
        print("  SKIP  real enquiry dispatch (pass --send to enable)")
        return

    r = await c.post("/api/contact", json={
        "name": "Live Test",
        "email": "",
        "phone": "",
        "service": "Other",
        "message": "Automated smoke test -- please ignore.",
    })
    ok("enquiry accepted by relay", r.status_code == 200 and r.json() == {"ok": True}, r.text)


# ---------------------------------------------------------------------------
# 4. OpenAPI
# ---------------------------------------------------------------------------

async def test_openapi(c: httpx.AsyncClient):
    section("OpenAPI")

    r = await c.get("/openapi.json")
    ok("GET /openapi.json returns 200", r.status_code == 200)
    paths = r.json().get("paths", {})
    for path in ("/api/contact", "/api/public/calculate-repayment", "/health/"):
        ok(f"{path} documented", path in paths)


async def main():
    global BASE
    parser = argparse.ArgumentParser(description="Live smoke tests for the SavantFS API")
    parser.add_argument("--base", default=BASE, help="server base URL")
    parser.add_argument("--send", action="store_true", help="dispatch a real enquiry email")
    args = parser.parse_args()
    BASE = args.base

    async with httpx.AsyncClient(base_url=BASE, headers=HEADERS, timeout=30) as c:

        # Pre-flight: make sure server is up
        try:
            r = await c.get("/health/")
            if r.status_code != 200:
                print(f"\n  Server returned {r.status_code} on /health/ -- is it running?")
                sys.exit(2)
        except httpx.ConnectError:
            print(f"\n  Cannot connect to server at {BASE} -- is it running?")
            sys.exit(2)

        await test_health(c)
        await test_public_api(c)
        await test_contact(c, args.send)
        await test_openapi(c)

    # Summary
    print(f"\n{'=' * 60}")
    print(f"  RESULTS: {PASS} passed, {FAIL} failed")
    print(f"{'=' * 60}")

    if ERRORS:
        print("\nFailures:")
        for e in ERRORS:
            print(f"  - {e}")

    sys.exit(0 if FAIL == 0 else 1)


if __name__ == "__main__":
    asyncio.run(main())
