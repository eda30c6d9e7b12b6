NEW_COMPANY = {
    "handle": "new",
    "name": "New",
    "description": "DescNew",
    "numEmployees": 10,
    "logoUrl": "http://new.img",
}


# ─── POST /companies ───────────────────────────────────────────

def test_create_company_as_admin(client, seeded, admin_headers):
    resp = client.post("/api/v1/companies", json=NEW_COMPANY, headers=admin_headers)

    assert resp.status_code == 201
    assert resp.json() == NEW_COMPANY


def test_create_company_requires_admin(client, seeded, u1_headers):
    resp = client.post("/api/v1/companies", json=NEW_COMPANY, headers=u1_headers)
    assert resp.status_code == 401
    assert resp.json()["error"] == "UNAUTHORIZED"

    resp = client.post("/api/v1/companies", json=NEW_COMPANY)
    assert resp.status_code == 401


def test_create_company_bad_data(client, seeded, admin_headers):
    resp = client.post("/api/v1/companies", json={"handle": "new"}, headers=admin_headers)
    assert resp.status_code == 400

    resp = client.post(
        "/api/v1/companies",
        json={**NEW_COMPANY, "hasCoffeeMachine": True},
        headers=admin_headers,
    )
    assert resp.status_code == 400
    assert any("hasCoffeeMachine" in detail for detail in resp.json()["details"])


def test_create_company_duplicate(client, seeded, admin_headers):
    resp = client.post(
        "/api/v1/companies",
        json={**NEW_COMPANY, "handle": "c1"},
        headers=admin_headers,
    )

    assert resp.status_code == 409


# ─── GET /companies ────────────────────────────────────────────

def test_list_companies_anonymous(client, seeded):
    resp = client.get("/api/v1/companies", follow_redirects=False)

    assert resp.status_code == 200
    assert resp.json() == [
        {
            "handle": f"c{n}",
            "name": f"C{n}",
            "description": f"Desc{n}",
            "numEmployees": n,
            "logoUrl": f"http://c{n}.img",
        }
        for n in (1, 2, 3)
    ]


def test_list_companies_filtered(client, seeded):
    resp = client.get("/api/v1/companies", params={"minEmployees": 2, "name": "C"})

    assert [c["handle"] for c in resp.json()] == ["c2", "c3"]


def test_list_companies_min_over_max(client, seeded):
    resp = client.get("/api/v1/companies", params={"minEmployees": 3, "maxEmployees": 1})

    assert resp.status_code == 400
    assert resp.json()["message"] == "Min employees cannot be greater than max"


def test_list_companies_unknown_filter(client, seeded):
    resp = client.get("/api/v1/companies", params={"numberOfTemps": 3})

    assert resp.status_code == 400


def test_list_companies_non_numeric_bound(client, seeded):
    resp = client.get("/api/v1/companies", params={"minEmployees": "lots"})

    assert resp.status_code == 400


# ─── GET /companies/:handle ────────────────────────────────────

def test_get_company_with_jobs(client, seeded):
    resp = client.get("/api/v1/companies/c2")

    assert resp.status_code == 200
    body = resp.json()
    assert body["handle"] == "c2"
    assert body["jobs"] == [{
        "id": seeded["Machine Learning Engineer"],
        "title": "Machine Learning Engineer",
        "salary": 128000,
        "equity": "0.45",
    }]


def test_get_company_not_found(client, seeded):
    resp = client.get("/api/v1/companies/nope")

    assert resp.status_code == 404
    assert resp.json()["message"] == "No company: nope"


# ─── PATCH /companies/:handle ──────────────────────────────────

def test_update_company(client, seeded, admin_headers):
    resp = client.patch("/api/v1/companies/c1", json={"name": "C1-new"}, headers=admin_headers)

    assert resp.status_code == 200
    assert resp.json() == {
        "handle": "c1",
        "name": "C1-new",
        "description": "Desc1",
        "numEmployees": 1,
        "logoUrl": "http://c1.img",
    }


def test_update_company_requires_admin(client, seeded, u1_headers):
    resp = client.patch("/api/v1/companies/c1", json={"name": "C1-new"}, headers=u1_headers)

    assert resp.status_code == 401


def test_update_company_rejected_bodies(client, seeded, admin_headers):
    for body in ({"handle": "c1-new"}, {}, {"numEmployees": "many"}):
        resp = client.patch("/api/v1/companies/c1", json=body, headers=admin_headers)
        assert resp.status_code == 400, body


def test_update_company_not_found(client, seeded, admin_headers):
    resp = client.patch("/api/v1/companies/nope", json={"name": "x"}, headers=admin_headers)

    assert resp.status_code == 404


# ─── DELETE /companies/:handle ─────────────────────────────────

def test_delete_company(client, seeded, admin_headers):
    resp = client.delete("/api/v1/companies/c1", headers=admin_headers)

    assert resp.json() == {"deleted": "c1"}
    assert client.get("/api/v1/companies/c1").status_code == 404


def test_delete_company_requires_admin(client, seeded, u1_headers):
    assert client.delete("/api/v1/companies/c1", headers=u1_headers).status_code == 401
    assert client.delete("/api/v1/companies/c1").status_code == 401


def test_delete_company_not_found(client, seeded, admin_headers):
    resp = client.delete("/api/v1/companies/nope", headers=admin_headers)

    assert resp.status_code == 404
