from datetime import timedelta

from presskits.services.fleet import find_stale_organizations, compute_setup_status, compute_bulk_health


def test_stale_scan_reports_oldest_kit_once_per_org(make_org, make_kit):
    org = make_org("org_stale", name="Stale Co")
    make_kit(org, status="validated", days_old=40)
    drafted = make_kit(org, status="drafted", days_old=50)

    rows = find_stale_organizations()

    assert rows == [{
        "orgId": "org_stale",
        "name": "Stale Co",
        "lastUpdated": drafted.updated_at.isoformat(),
    }]


def test_stale_scan_orders_oldest_first(make_org, make_kit):
    make_kit(make_org("org_a"), status="validated", days_old=35)
    make_kit(make_org("org_b"), status="drafted", days_old=90)
    make_kit(make_org("org_fresh"), status="validated", days_old=2)

    assert [r["orgId"] for r in find_stale_organizations()] == ["org_b", "org_a"]


def test_stale_scan_ignores_inactive_statuses(make_org, make_kit):
    org = make_org("org_x")
    make_kit(org, status="archived", days_old=400)
    make_kit(org, status="denied", days_old=400)
    make_kit(org, status="generating", days_old=400)

    assert find_stale_organizations() == []


def test_stale_scan_threshold_override(make_org, make_kit):
    make_kit(make_org("org_w"), status="validated", days_old=10)

    assert find_stale_organizations() == []
    assert [r["orgId"] for r in find_stale_organizations(timedelta(days=7))] == ["org_w"]


def test_stale_scan_threshold_from_config(app, make_org, make_kit):
    app.config["STALE_AFTER_DAYS"] = 5
    make_kit(make_org("org_cfg"), status="drafted", days_old=6)

    assert [r["orgId"] for r in find_stale_organizations()] == ["org_cfg"]


def test_stale_scan_matches_legacy_alias(make_org, make_kit):
    make_org("org_legacy")
    make_kit(status="validated", external_org_id="org_legacy", days_old=60)

    assert [r["orgId"] for r in find_stale_organizations()] == ["org_legacy"]


def test_setup_status(make_org, make_kit):
    ready = make_org("org_ready")
    make_kit(ready, status="validated", days_old=3)
    busy = make_org("org_busy")
    make_kit(busy, status="generating")
    make_org("org_empty")
    gone = make_org("org_gone")
    make_kit(gone, status="archived")

    by_org = {r["orgId"]: r for r in compute_setup_status()}

    assert by_org["org_ready"] == {"orgId": "org_ready", "hasKit": True, "status": "validated", "isSetup": True}
    assert by_org["org_busy"] == {"orgId": "org_busy", "hasKit": True, "status": "generating", "isSetup": False}
    assert by_org["org_empty"] == {"orgId": "org_empty", "hasKit": False, "status": None, "isSetup": False}
    assert by_org["org_gone"]["hasKit"] is False


def test_setup_status_uses_most_recent_active_kit(make_org, make_kit):
    org = make_org("org_m")
    make_kit(org, status="validated", days_old=20)
    make_kit(org, status="generating", days_old=1)

    [row] = compute_setup_status()
    assert row["status"] == "generating"


def test_bulk_health(make_org, make_kit):
    org = make_org("org_h")
    make_kit(org, status="validated")
    make_kit(org, status="archived")
    make_kit(org, status="archived")
    make_org("org_none")

    by_org = {r["orgId"]: r for r in compute_bulk_health()}

    assert by_org["org_h"] == {"orgId": "org_h", "hasValidated": True, "hasDrafted": False, "totalKits": 3}
    assert by_org["org_none"] == {"orgId": "org_none", "hasValidated": False, "hasDrafted": False, "totalKits": 0}
