"""Validation Routes — end-to-end tests through the FastAPI app.

Tests cover:
    - Registration: 201 on valid (password not echoed), 400 with report body verbatim on invalid
    - Decode failures (wrong JSON types, malformed JSON, non-object body) return
      PAYLOAD_DECODE_ERROR, distinct from rule reports
    - Generic validate endpoint: 200 valid, 400 report, 404 unknown schema
    - Schema catalog: list and describe
    - Health and readiness checks
"""

VALID_REGISTRATION = {
    "username": "praveee",
    "email": "praveen@gmail.com",
    "password": "Abcdef1!",
    "age": 20,
}


# ─── registrations ───────────────────────────────────────────────

async def test_valid_registration_returns_201(client):
    res = await client.post("/api/v1/registrations", json=VALID_REGISTRATION)
    assert res.status_code == 201
    body = res.json()
    assert body == {
        "status": "registered",
        "username": "praveee",
        "email": "praveen@gmail.com",
        "age": 20,
    }


async def test_invalid_registration_returns_report(client):
    payload = dict(VALID_REGISTRATION, email="praveen@yahoo.com", age=17)
    res = await client.post("/api/v1/registrations", json=payload)
    assert res.status_code == 400
    assert res.json() == {
        "email": [
            {
                "code": "contains",
                "message": "email must be a gmail address",
                "params": {"needle": "gmail"},
            },
        ],
        "age": [
            {
                "code": "range",
                "message": "age must be between 18 and 22",
                "params": {"min": 18, "max": 22, "actual": 17},
            },
        ],
    }


async def test_report_preserves_schema_field_order(client):
    res = await client.post("/api/v1/registrations", json={})
    assert res.status_code == 400
    assert list(res.json()) == ["username", "email", "password", "age"]


async def test_wrong_json_type_is_decode_error(client):
    payload = dict(VALID_REGISTRATION, age="20")
    res = await client.post("/api/v1/registrations", json=payload)
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "PAYLOAD_DECODE_ERROR"
    assert error["category"] == "decode"
    assert any("age" in d["location"] for d in error["details"])


async def test_malformed_json_is_decode_error(client):
    res = await client.post(
        "/api/v1/registrations",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "PAYLOAD_DECODE_ERROR"


# ─── generic validate ────────────────────────────────────────────

async def test_generic_validate_valid_record(client):
    res = await client.post("/api/v1/schemas/contact/validate", json={
        "name": "Ana",
        "email": "ana@example.com",
        "message": "Hello there, just checking in.",
    })
    assert res.status_code == 200
    assert res.json() == {"status": "valid", "schema_name": "contact"}


async def test_generic_validate_reports_type_mismatch(client):
    res = await client.post("/api/v1/schemas/registration/validate", json=dict(
        VALID_REGISTRATION, age="twenty",
    ))
    assert res.status_code == 400
    assert res.json() == {
        "age": [
            {
                "code": "type",
                "message": "age must be of type integer, got string",
                "params": {"expected": "integer", "actual": "string"},
            },
        ],
    }


async def test_generic_validate_unknown_schema_is_404(client):
    res = await client.post("/api/v1/schemas/nope/validate", json={})
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "SCHEMA_NOT_FOUND"


async def test_generic_validate_rejects_non_object_body(client):
    res = await client.post("/api/v1/schemas/contact/validate", json=[1, 2, 3])
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "PAYLOAD_DECODE_ERROR"


# ─── catalog ─────────────────────────────────────────────────────

async def test_list_schemas(client):
    res = await client.get("/api/v1/schemas")
    assert res.status_code == 200
    assert res.json() == [
        {"name": "registration", "field_count": 4},
        {"name": "contact", "field_count": 4},
    ]


async def test_describe_schema(client):
    res = await client.get("/api/v1/schemas/registration")
    assert res.status_code == 200
    body = res.json()
    assert [f["name"] for f in body["fields"]] == ["username", "email", "password", "age"]
    password = body["fields"][2]
    assert [r["code"] for r in password["rules"]] == ["required", "password_strength", "regex"]
    assert password["optional"] is False


async def test_describe_unknown_schema_is_404(client):
    res = await client.get("/api/v1/schemas/nope")
    assert res.status_code == 404


# ─── health ──────────────────────────────────────────────────────

async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_builds_schemas(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"schemas": "built"}}
