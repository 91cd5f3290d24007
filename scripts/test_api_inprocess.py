"""
Backend API smoke test – in-process via TestClient (no separate server).
Walks the owner registration -> admin verification -> notification flow against DATABASE_URL.
Run: python scripts/test_api_inprocess.py
"""
import sys
import os
import time
from datetime import date, timedelta
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from fastapi.testclient import TestClient
from app.config import get_settings
from app.main import app, init_db

init_db()

client = TestClient(app)
settings = get_settings()
passed = failed = 0
owner_token = admin_token = None
house_id = None
SUFFIX = str(int(time.time()))
OWNER_EMAIL = f"owner_{SUFFIX}@test.tagamidsalip.demo"


def req(method, path, body=None, token=None):
    kwargs = {"headers": {"Accept": "application/json"}}
    if token:
        kwargs["headers"]["Authorization"] = f"Bearer {token}"
    if body:
        kwargs["json"] = body
    r = client.request(method, path, **kwargs)
    if r.status_code >= 400:
        raise RuntimeError(f"HTTP {r.status_code}: {r.text}")
    return r.json() if r.content else {}


def test(name, fn):
    global passed, failed
    try:
        fn()
        print(f"  OK  {name}")
        passed += 1
    except Exception as e:
        print(f"  FAIL {name}: {e}")
        failed += 1


def main():
    global owner_token, admin_token, house_id
    print("TagaMidsalip Backend API Tests (in-process)\n" + "=" * 50)

    test("GET /", lambda: req("GET", "/"))
    test("GET /health", lambda: req("GET", "/health"))
    test("GET /barangays", lambda: req("GET", "/barangays"))

    print("\n--- Auth ---")
    test("POST /auth/signup (owner)", lambda: req("POST", "/auth/signup", {
        "name": "Smoke Owner", "email": OWNER_EMAIL, "password": "testpass123", "confirm_password": "testpass123"}))
    owner_token = req("POST", "/auth/login", {"email": OWNER_EMAIL, "password": "testpass123"})["access_token"]
    admin_token = req("POST", "/auth/login", {"email": settings.admin_email, "password": settings.admin_password})["access_token"]
    test("GET /auth/me (owner)", lambda: req("GET", "/auth/me", token=owner_token))

    print("\n--- Registration ---")
    def register():
        global house_id
        today = date.today()
        house_id = req("POST", "/boarding-houses", {
            "name": f"Smoke Boarding House {SUFFIX}", "barangay": "Poblacion A", "street": "Rizal St",
            "house_number": "12", "contact_number": "09171234567", "permit_number": f"BP-{SUFFIX}",
            "permit_issue_date": (today - timedelta(days=30)).isoformat(),
            "permit_expiry_date": (today + timedelta(days=365)).isoformat(),
            "latitude": 8.0296, "longitude": 123.3171, "price_min": 1500, "price_max": 2500,
            "gender_accommodation": "mixed", "total_rooms": 2, "beds_per_room": 4}, token=owner_token)["id"]
    test("POST /boarding-houses", register)
    test("GET /boarding-houses (owner)", lambda: req("GET", "/boarding-houses", token=owner_token))
    test("GET /boarding-houses/{id}/occupancy", lambda: req("GET", f"/boarding-houses/{house_id}/occupancy", token=owner_token))

    print("\n--- Compliance ---")
    test("POST /admin/boarding-houses/{id}/verify", lambda: req("POST", f"/admin/boarding-houses/{house_id}/verify", token=admin_token))
    test("GET /admin/stats", lambda: req("GET", "/admin/stats", token=admin_token))
    test("POST /admin/permits/reevaluate", lambda: req("POST", "/admin/permits/reevaluate", token=admin_token))

    print("\n--- Notifications ---")
    test("GET /notifications/unread-count", lambda: req("GET", "/notifications/unread-count", token=owner_token))
    test("PUT /notifications/read-all", lambda: req("PUT", "/notifications/read-all", token=owner_token))

    test("DELETE /boarding-houses/{id}", lambda: req("DELETE", f"/boarding-houses/{house_id}", token=owner_token))

    print("\n" + "=" * 50)
    print(f"Passed: {passed}  Failed: {failed}  Total: {passed + failed}")
    sys.exit(0 if failed == 0 else 1)


if __name__ == "__main__":
    main()
