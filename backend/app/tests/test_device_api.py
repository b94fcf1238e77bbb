"""
Test suite for device API endpoints
"""

import re
import uuid

TIMESTAMP_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")


def create_device(client, name, **fields):
    response = client.post("/api/v1/devices", json={"name": name, **fields})
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_create_device_returns_created_payload(client):
    """Test that creating a device returns 201 with the stored device"""
    response = client.post(
        "/api/v1/devices", json={"name": "gateway-01", "location": "Greenhouse A"}
    )

    assert response.status_code == 201
    body = response.json()
    assert body["code"] == 201
    assert body["message"] == "device created successfully"
    assert "pagination" not in body

    data = body["data"]
    assert uuid.UUID(data["id"])
    assert data["name"] == "gateway-01"
    assert data["location"] == "Greenhouse A"
    assert data["status"] == "active"
    assert TIMESTAMP_PATTERN.match(data["created_at"])
    assert TIMESTAMP_PATTERN.match(data["updated_at"])


def test_create_then_get_round_trip(client):
    """Test that a created device can be read back with the same fields"""
    created = create_device(client, "gateway-02", location="Roof", status="maintenance")

    response = client.get(f"/api/v1/devices/{created['id']}")

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "get detail device successfully"
    data = body["data"]
    assert data["id"] == created["id"]
    assert data["name"] == "gateway-02"
    assert data["location"] == "Roof"
    assert data["status"] == "maintenance"
    assert data["sensors"] == []


def test_create_duplicate_name_conflicts(client):
    """Test that a second device with the same name is rejected with 409"""
    create_device(client, "gateway-dup")

    response = client.post("/api/v1/devices", json={"name": "gateway-dup"})

    assert response.status_code == 409
    assert response.json() == {"code": 409, "message": "device name already exist"}


def test_create_device_missing_name(client):
    response = client.post("/api/v1/devices", json={"location": "Lab"})

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == 400
    assert "name is a required field" in body["message"]


def test_create_device_collects_all_field_errors(client):
    """Test that every violated field is reported in one message"""
    response = client.post(
        "/api/v1/devices", json={"name": "x" * 101, "status": "s" * 51}
    )

    assert response.status_code == 400
    message = response.json()["message"]
    assert "name must be a maximum of 100 characters in length" in message
    assert "status must be a maximum of 50 characters in length" in message


def test_create_device_malformed_body(client):
    response = client.post(
        "/api/v1/devices",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"code": 400, "message": "Failed to parse request body"}


def test_get_unknown_device_returns_404(client):
    response = client.get(f"/api/v1/devices/{uuid.uuid4()}")

    assert response.status_code == 404
    assert response.json() == {"code": 404, "message": "device not found"}


def test_get_malformed_device_id_returns_404(client):
    response = client.get("/api/v1/devices/not-a-uuid")

    assert response.status_code == 404


def test_update_status_only_leaves_other_fields(client):
    """Test that a patch with only status changes only status"""
    created = create_device(client, "gateway-03", location="Barn")

    response = client.put(
        f"/api/v1/devices/{created['id']}", json={"status": "inactive"}
    )

    assert response.status_code == 200
    assert response.json() == {"code": 200, "message": "update device successfully"}

    data = client.get(f"/api/v1/devices/{created['id']}").json()["data"]
    assert data["status"] == "inactive"
    assert data["name"] == "gateway-03"
    assert data["location"] == "Barn"


def test_update_null_field_is_ignored(client):
    created = create_device(client, "gateway-04", location="Shed")

    response = client.put(
        f"/api/v1/devices/{created['id']}", json={"location": None, "name": "gateway-04b"}
    )

    assert response.status_code == 200
    data = client.get(f"/api/v1/devices/{created['id']}").json()["data"]
    assert data["name"] == "gateway-04b"
    assert data["location"] == "Shed"


def test_update_unknown_device_returns_404(client):
    response = client.put(f"/api/v1/devices/{uuid.uuid4()}", json={"status": "inactive"})

    assert response.status_code == 404
    assert response.json()["message"] == "device not found"


def test_update_invalid_patch_returns_400_and_keeps_record(client):
    created = create_device(client, "gateway-05")

    response = client.put(f"/api/v1/devices/{created['id']}", json={"name": ""})

    assert response.status_code == 400
    assert "name is a required field" in response.json()["message"]
    data = client.get(f"/api/v1/devices/{created['id']}").json()["data"]
    assert data["name"] == "gateway-05"


def test_update_rename_to_existing_name_conflicts(client):
    create_device(client, "gateway-06")
    other = create_device(client, "gateway-07")

    response = client.put(f"/api/v1/devices/{other['id']}", json={"name": "gateway-06"})

    assert response.status_code == 409


def test_delete_device_then_get_returns_404(client):
    """Test Create -> FindByID -> Delete -> FindByID round trip"""
    created = create_device(client, "gateway-08")
    assert client.get(f"/api/v1/devices/{created['id']}").status_code == 200

    response = client.delete(f"/api/v1/devices/{created['id']}")

    assert response.status_code == 200
    assert response.json() == {"code": 200, "message": "delete device successfully"}
    assert client.get(f"/api/v1/devices/{created['id']}").status_code == 404
    assert client.delete(f"/api/v1/devices/{created['id']}").status_code == 404


def test_list_devices_second_page(client):
    """Test that page 2 of 25 devices with limit 10 returns records 11-20"""
    for index in range(1, 26):
        create_device(client, f"device-{index:02d}")

    response = client.get(
        "/api/v1/devices",
        params={"page": 2, "limit": 10, "order_by": "name", "sort_by": "asc"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "get list device successfully"
    assert [device["name"] for device in body["data"]] == [
        f"device-{index:02d}" for index in range(11, 21)
    ]
    assert "sensors" not in body["data"][0]
    assert body["pagination"] == {
        "page": 2,
        "limit": 10,
        "order_by": "name",
        "sort_by": "asc",
        "search": "",
        "total_data": 25,
        "total_page": 3,
    }


def test_list_devices_defaults(client):
    create_device(client, "device-a")

    body = client.get("/api/v1/devices").json()

    assert body["pagination"]["page"] == 1
    assert body["pagination"]["limit"] == 10
    assert body["pagination"]["order_by"] == "created_at"
    assert body["pagination"]["sort_by"] == "desc"
    assert body["pagination"]["total_data"] == 1


def test_list_devices_search_is_case_insensitive(client):
    create_device(client, "North Gateway")
    create_device(client, "south-gateway")
    create_device(client, "weather-station")

    body = client.get("/api/v1/devices", params={"search": "GATEWAY"}).json()

    assert sorted(device["name"] for device in body["data"]) == [
        "North Gateway",
        "south-gateway",
    ]
    assert body["pagination"]["total_data"] == 2
    assert body["pagination"]["total_page"] == 1


def test_list_devices_search_without_match(client):
    create_device(client, "gateway-09")

    body = client.get("/api/v1/devices", params={"search": "nothing-here"}).json()

    assert body["data"] == []
    assert body["pagination"]["total_data"] == 0
    assert body["pagination"]["total_page"] == 0


def test_list_devices_rejects_unknown_order_column(client):
    response = client.get("/api/v1/devices", params={"order_by": "name; DROP TABLE devices"})

    assert response.status_code == 400
    assert "order_by must be one of" in response.json()["message"]


def test_list_devices_rejects_invalid_paging(client):
    response = client.get("/api/v1/devices", params={"page": 0, "sort_by": "sideways"})

    assert response.status_code == 400
    message = response.json()["message"]
    assert "page must be 1 or greater" in message
    assert "sort_by must be one of" in message


def test_list_devices_non_integer_page(client):
    response = client.get("/api/v1/devices", params={"page": "abc"})

    assert response.status_code == 400
    assert response.json()["message"] == "Failed to parse request parameters"


def test_ping(client):
    response = client.get("/ping")

    assert response.status_code == 200
    assert response.json() == {"message": "pong"}


def test_list_devices_rejects_oversized_paging(client):
    response = client.get(
        "/api/v1/devices", params={"page": 10**19, "limit": 10}
    )

    assert response.status_code == 400
    assert response.json() == {
        "code": 400,
        "message": "page must be 1000000 or less",
    }

    response = client.get("/api/v1/devices", params={"limit": 5000})

    assert response.status_code == 400
    assert response.json()["message"] == "limit must be 1000 or less"


def test_list_devices_search_treats_wildcards_literally(client):
    create_device(client, "rack_01")
    create_device(client, "rack-02")
    create_device(client, "100% uptime")

    underscore = client.get("/api/v1/devices", params={"search": "_"}).json()
    percent = client.get("/api/v1/devices", params={"search": "%"}).json()

    assert [device["name"] for device in underscore["data"]] == ["rack_01"]
    assert [device["name"] for device in percent["data"]] == ["100% uptime"]
