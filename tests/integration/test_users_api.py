"""End-to-end tests for the user endpoints."""

from datetime import date, timedelta

import pytest
from fastapi import status

JOHN = {
    "firstName": "John",
    "lastName": "Doe",
    "birthdate": "1985-05-15",
    "email": "john.doe@example.com",
}
JANE = {
    "firstName": "Jane",
    "lastName": "Smith",
    "birthdate": "1990-07-20",
    "email": "jane.smith@example.com",
}


@pytest.fixture
def john_id(client):
    return client.post("/v1/users", json=JOHN).json()["id"]


@pytest.fixture
def jane_id(client):
    return client.post("/v1/users", json=JANE).json()["id"]


# ===========================
# Create
# ===========================


def test_create_user(client):
    response = client.post("/v1/users", json=JOHN)

    assert response.status_code == status.HTTP_201_CREATED
    assert response.json() == {"id": 1, **JOHN}


def test_create_user_accepts_snake_case_keys(client):
    body = {
        "first_name": "John",
        "last_name": "Doe",
        "birthdate": "1985-05-15",
        "email": "john.doe@example.com",
    }

    response = client.post("/v1/users", json=body)

    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["firstName"] == "John"


@pytest.mark.parametrize(
    ("overrides", "detail"),
    [
        ({"firstName": None}, "First name is required."),
        ({"firstName": "!@#$%%"}, "First name contains invalid characters."),
        ({"lastName": ""}, "Last name is required."),
        ({"birthdate": None}, "Birthdate is required."),
        ({"email": "john.doe"}, "Invalid email format."),
    ],
)
def test_create_user_validation(client, overrides, detail):
    response = client.post("/v1/users", json={**JOHN, **overrides})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    body = response.json()
    assert body["detail"] == detail
    assert body["status"] == 400
    assert client.get("/v1/users").json() == []


def test_create_user_future_birthdate(client):
    tomorrow = (date.today() + timedelta(days=1)).isoformat()

    response = client.post("/v1/users", json={**JOHN, "birthdate": tomorrow})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Birthdate must be a date in the past."


def test_create_user_malformed_date_is_422(client):
    response = client.post("/v1/users", json={**JOHN, "birthdate": "yesterday"})

    assert response.status_code == 422
    assert response.json()["errors"][0]["loc"] == ["body", "birthdate"]


def test_create_user_duplicate_email(client, john_id):
    response = client.post("/v1/users", json={**JANE, "email": "JOHN.DOE@example.com"})

    assert response.status_code == status.HTTP_409_CONFLICT


# ===========================
# Reads
# ===========================


def test_list_users(client, john_id, jane_id):
    response = client.get("/v1/users")

    assert response.status_code == status.HTTP_200_OK
    assert [user["email"] for user in response.json()] == [
        JOHN["email"],
        JANE["email"],
    ]


def test_list_users_simple(client, john_id):
    response = client.get("/v1/users/simple")

    assert response.json() == [{"id": john_id, "firstName": "John", "lastName": "Doe"}]


def test_get_user_by_id(client, john_id):
    response = client.get(f"/v1/users/{john_id}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["email"] == JOHN["email"]


def test_get_user_by_id_not_found(client):
    response = client.get("/v1/users/42")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "User with ID=42 was not found"


def test_get_user_by_id_invalid(client):
    response = client.get("/v1/users/0")

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Invalid id"


def test_get_user_by_email(client, john_id):
    response = client.get("/v1/users/email", params={"email": "JOHN.DOE@EXAMPLE.COM"})

    assert [user["id"] for user in response.json()] == [john_id]


def test_get_user_by_email_unknown_is_empty_list(client, john_id):
    response = client.get("/v1/users/email", params={"email": "nobody@example.com"})

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []


def test_get_user_by_blank_email(client):
    response = client.get("/v1/users/email", params={"email": "  "})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Invalid email"


def test_get_users_by_partial_email(client, john_id, jane_id):
    response = client.get("/v1/users/partial-email", params={"partialEmail": "SMITH"})

    assert [user["id"] for user in response.json()] == [jane_id]


def test_get_users_by_partial_email_invalid(client):
    response = client.get("/v1/users/partial-email", params={"partialEmail": "a b"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Email fragment contains invalid characters."


def test_get_users_older_than(client, john_id, jane_id):
    response = client.get("/v1/users/older/1990-01-01")

    assert [user["id"] for user in response.json()] == [john_id]


def test_get_users_older_than_malformed_date(client):
    response = client.get("/v1/users/older/not-a-date")

    assert response.status_code == 422


def test_matching_users_returns_id_and_email(client, john_id, jane_id):
    response = client.post("/v1/users/matching-users", json={"lastName": "Doe"})

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == [{"id": john_id, "email": JOHN["email"]}]


def test_matching_users_empty_search_returns_all(client, john_id, jane_id):
    response = client.post("/v1/users/matching-users", json={})

    assert len(response.json()) == 2


def test_matching_users_invalid_search(client, john_id):
    response = client.post("/v1/users/matching-users", json={"firstName": "J0hn"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Invalid first name."


# ===========================
# Update
# ===========================


def test_update_user_partial(client, john_id):
    response = client.put(f"/v1/users/{john_id}", json={"lastName": "Dorian"})

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"id": john_id, **JOHN, "lastName": "Dorian"}


def test_update_user_null_keeps_value(client, john_id):
    response = client.put(
        f"/v1/users/{john_id}", json={"firstName": None, "email": "jd@example.com"}
    )

    assert response.json()["firstName"] == "John"
    assert response.json()["email"] == "jd@example.com"


def test_update_user_invalid_field(client, john_id):
    response = client.put(f"/v1/users/{john_id}", json={"email": "broken"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Invalid email."
    assert client.get(f"/v1/users/{john_id}").json()["email"] == JOHN["email"]


def test_update_user_not_found(client):
    response = client.put("/v1/users/9", json={"lastName": "Dorian"})

    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_update_user_email_taken(client, john_id, jane_id):
    response = client.put(f"/v1/users/{jane_id}", json={"email": JOHN["email"]})

    assert response.status_code == status.HTTP_409_CONFLICT


# ===========================
# Delete
# ===========================


def test_delete_user(client, john_id):
    response = client.delete(f"/v1/users/{john_id}")

    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert response.content == b""
    assert client.get(f"/v1/users/{john_id}").status_code == status.HTTP_404_NOT_FOUND


def test_delete_user_not_found(client):
    response = client.delete("/v1/users/1")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "User with ID=1 was not found"
