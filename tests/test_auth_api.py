"""
Signup, login, logout and profile endpoint tests
"""

from sqlalchemy import select

from app.models import User

from conftest import PASSWORD, RESTAURANT_PROFILE


class TestSignup:
    """Test POST /api/auth/signup"""

    async def test_customer_signup_starts_session(self, client):
        response = await client.post(
            "/api/auth/signup",
            json={"name": "Ann", "email": "ann@example.com", "password": PASSWORD, "role": "customer"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "User created successfully"
        assert body["user"]["email"] == "ann@example.com"
        assert body["user"]["role"] == "customer"
        assert "password" not in body["user"]
        assert "passwordHash" not in body["user"]
        assert "sid" in response.cookies

        profile = await client.get("/api/auth/profile")
        assert profile.status_code == 200
        assert profile.json()["user"]["id"] == body["user"]["id"]

    async def test_password_is_stored_hashed(self, client, db):
        await client.post(
            "/api/auth/signup",
            json={"name": "Ann", "email": "ann@example.com", "password": PASSWORD, "role": "customer"},
        )

        user = (await db.execute(select(User).where(User.email == "ann@example.com"))).scalar_one()
        assert user.password_hash != PASSWORD
        assert user.password_hash.startswith("$2")

    async def test_restaurant_signup_with_profile(self, client):
        response = await client.post(
            "/api/auth/signup",
            json={
                "name": "Noodle Bar",
                "email": "noodles@example.com",
                "password": PASSWORD,
                "role": "restaurant",
                **RESTAURANT_PROFILE,
            },
        )

        assert response.status_code == 201
        user = response.json()["user"]
        assert user["role"] == "restaurant"
        assert user["contactInfo"] == RESTAURANT_PROFILE["contactInfo"]
        assert user["timings"] == RESTAURANT_PROFILE["timings"]

    async def test_restaurant_signup_requires_profile_fields(self, client):
        response = await client.post(
            "/api/auth/signup",
            json={
                "name": "Noodle Bar",
                "email": "noodles@example.com",
                "password": PASSWORD,
                "role": "restaurant",
                "location": "Somewhere",
            },
        )

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert "timings" in body["message"]

    async def test_customer_signup_drops_restaurant_fields(self, client, db):
        response = await client.post(
            "/api/auth/signup",
            json={
                "name": "Ann",
                "email": "ann@example.com",
                "password": PASSWORD,
                "role": "customer",
                "location": "Oakland, CA",
                **{k: v for k, v in RESTAURANT_PROFILE.items() if k != "location"},
            },
        )

        assert response.status_code == 201
        user = response.json()["user"]
        assert user["location"] == "Oakland, CA"
        assert user["description"] is None
        assert user["contactInfo"] is None
        assert user["timings"] is None

        stored = (await db.execute(select(User).where(User.email == "ann@example.com"))).scalar_one()
        assert stored.description is None
        assert stored.timings is None

    async def test_duplicate_email_conflict(self, client):
        payload = {"name": "Ann", "email": "ann@example.com", "password": PASSWORD, "role": "customer"}
        assert (await client.post("/api/auth/signup", json=payload)).status_code == 201

        response = await client.post("/api/auth/signup", json={**payload, "name": "Other Ann"})

        assert response.status_code == 409
        assert response.json() == {"message": "Email already registered", "code": "DUPLICATE_EMAIL"}

    async def test_invalid_role(self, client):
        response = await client.post(
            "/api/auth/signup",
            json={"name": "Ann", "email": "ann@example.com", "password": PASSWORD, "role": "admin"},
        )
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    async def test_missing_fields_and_short_password(self, client):
        missing = await client.post("/api/auth/signup", json={"email": "ann@example.com"})
        short = await client.post(
            "/api/auth/signup",
            json={"name": "Ann", "email": "ann@example.com", "password": "123", "role": "customer"},
        )
        bad_email = await client.post(
            "/api/auth/signup",
            json={"name": "Ann", "email": "not-an-email", "password": PASSWORD, "role": "customer"},
        )

        assert missing.status_code == 400
        assert short.status_code == 400
        assert bad_email.status_code == 400


class TestLogin:
    """Test POST /api/auth/login"""

    async def test_login_with_correct_password(self, make_client, customer):
        client = make_client()
        response = await client.post(
            "/api/auth/login", json={"email": "jane@example.com", "password": PASSWORD}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Login successful"
        assert body["user"]["id"] == customer.id
        assert "passwordHash" not in body["user"]
        assert (await client.get("/api/auth/profile")).status_code == 200

    async def test_login_with_matching_role(self, make_client, restaurant):
        client = make_client()
        response = await client.post(
            "/api/auth/login",
            json={"email": "owner@pizza.example", "password": PASSWORD, "role": "restaurant"},
        )
        assert response.status_code == 200

    async def test_wrong_password(self, make_client, customer):
        client = make_client()
        response = await client.post(
            "/api/auth/login", json={"email": "jane@example.com", "password": PASSWORD + "x"}
        )

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_CREDENTIALS"
        assert "sid" not in response.cookies

    async def test_unknown_email(self, client):
        response = await client.post(
            "/api/auth/login", json={"email": "ghost@example.com", "password": PASSWORD}
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"

    async def test_role_mismatch_is_invalid_credentials(self, make_client, customer):
        client = make_client()
        response = await client.post(
            "/api/auth/login",
            json={"email": "jane@example.com", "password": PASSWORD, "role": "restaurant"},
        )
        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_CREDENTIALS"

    async def test_login_replaces_previous_session(self, make_client, customer, store):
        client = make_client()
        await client.post("/api/auth/login", json={"email": "jane@example.com", "password": PASSWORD})
        first = client.cookies.get("sid")

        await client.post("/api/auth/login", json={"email": "jane@example.com", "password": PASSWORD})
        second = client.cookies.get("sid")

        assert first != second
        assert store.get(first) is None
        assert store.get(second) is not None


class TestLogout:
    """Test POST /api/auth/logout"""

    async def test_logout_ends_session(self, customer):
        response = await customer.client.post("/api/auth/logout")

        assert response.status_code == 200
        assert response.json() == {"message": "Logged out successfully"}
        assert (await customer.client.get("/api/auth/profile")).status_code == 401

    async def test_logout_is_idempotent(self, client):
        first = await client.post("/api/auth/logout")
        second = await client.post("/api/auth/logout")
        assert first.status_code == 200
        assert second.status_code == 200


class TestProfile:
    """Test GET/PUT /api/auth/profile"""

    async def test_profile_requires_session(self, client):
        get = await client.get("/api/auth/profile")
        put = await client.put("/api/auth/profile", json={"name": "X"})

        assert get.status_code == 401
        assert get.json()["code"] == "AUTHENTICATION_REQUIRED"
        assert put.status_code == 401

    async def test_partial_update(self, customer):
        response = await customer.client.put(
            "/api/auth/profile",
            json={"location": "Oakland, CA", "country": "USA", "state": "CA"},
        )

        assert response.status_code == 200
        user = response.json()["user"]
        assert response.json()["message"] == "Profile updated successfully"
        assert user["name"] == "Jane Customer"
        assert user["location"] == "Oakland, CA"
        assert user["state"] == "CA"

    async def test_update_accepts_snake_case(self, restaurant):
        response = await restaurant.client.put(
            "/api/auth/profile", json={"contact_info": "(415) 555-0111"}
        )
        assert response.status_code == 200
        assert response.json()["user"]["contactInfo"] == "(415) 555-0111"

    async def test_email_role_and_password_not_editable(self, customer):
        response = await customer.client.put(
            "/api/auth/profile",
            json={"email": "new@example.com", "role": "restaurant", "password": "changed!!", "name": "Jane"},
        )

        assert response.status_code == 200
        user = response.json()["user"]
        assert user["email"] == "jane@example.com"
        assert user["role"] == "customer"
        assert user["name"] == "Jane"

    async def test_timestamps_carry_utc_offset(self, customer):
        response = await customer.client.put("/api/auth/profile", json={"name": "Jane Q. Customer"})
        profile = await customer.client.get("/api/auth/profile")

        for user in (response.json()["user"], profile.json()["user"]):
            assert user["createdAt"].endswith("Z")
            assert user["updatedAt"].endswith("Z")

    async def test_blank_name_rejected(self, customer, db):
        response = await customer.client.put("/api/auth/profile", json={"name": "   "})

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
        name = (await db.execute(select(User.name).where(User.id == customer.id))).scalar_one()
        assert name == "Jane Customer"

    async def test_restaurant_cannot_clear_required_profile(self, restaurant, db):
        response = await restaurant.client.put(
            "/api/auth/profile",
            json={"description": None, "timings": "  ", "location": "3 Pier St"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Restaurant accounts require: description, timings"
        stored = (await db.execute(select(User).where(User.id == restaurant.id))).scalar_one()
        assert stored.description == RESTAURANT_PROFILE["description"]
        assert stored.location == RESTAURANT_PROFILE["location"]

    async def test_customer_may_clear_optional_fields(self, customer):
        await customer.client.put("/api/auth/profile", json={"location": "Oakland, CA"})
        response = await customer.client.put("/api/auth/profile", json={"location": None})

        assert response.status_code == 200
        assert response.json()["user"]["location"] is None

    async def test_profile_of_vanished_user(self, client, store):
        token = store.create(9999, "customer")
        client.cookies.set("sid", token)

        response = await client.get("/api/auth/profile")
        assert response.status_code == 404
        assert response.json()["message"] == "User not found"
