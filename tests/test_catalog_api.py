"""
Menu management and restaurant browsing tests
"""

from app.models import User


class TestDishManagement:
    """Test /api/restaurants/dishes"""

    async def test_add_and_list_dishes(self, restaurant, add_dish):
        dish = await add_dish(restaurant.client, name="Calzone", price=12.5)

        assert dish["restaurantId"] == restaurant.id
        assert dish["price"] == 12.5
        assert dish["category"] == "Main Course"

        response = await restaurant.client.get("/api/restaurants/dishes")
        assert response.status_code == 200
        assert [d["name"] for d in response.json()["dishes"]] == ["Calzone"]

    async def test_add_dish_response_envelope(self, restaurant):
        response = await restaurant.client.post(
            "/api/restaurants/dishes",
            json={
                "name": "Tiramisu",
                "description": "Coffee-soaked ladyfingers",
                "price": "6.75",
                "category": "Dessert",
                "ingredients": "Mascarpone, espresso, cocoa",
                "image": "https://img.example/tiramisu.jpg",
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Dish added successfully"
        assert body["dish"]["price"] == 6.75
        assert body["dish"]["image"] == "https://img.example/tiramisu.jpg"

    async def test_dish_validation(self, restaurant):
        bad_category = await restaurant.client.post(
            "/api/restaurants/dishes",
            json={
                "name": "Soup",
                "description": "Hot",
                "price": 4,
                "category": "Soup",
                "ingredients": "Water",
            },
        )
        bad_price = await restaurant.client.post(
            "/api/restaurants/dishes",
            json={
                "name": "Soup",
                "description": "Hot",
                "price": -1,
                "category": "Appetizer",
                "ingredients": "Water",
            },
        )

        assert bad_category.status_code == 400
        assert bad_price.status_code == 400

    async def test_update_dish_partial(self, restaurant, menu):
        dish_id = menu["pizza"]["id"]
        response = await restaurant.client.put(
            f"/api/restaurants/dishes/{dish_id}", json={"price": 11.0}
        )

        assert response.status_code == 200
        dish = response.json()["dish"]
        assert dish["price"] == 11.0
        assert dish["name"] == "Margherita"
        assert response.json()["message"] == "Dish updated successfully"

    async def test_delete_dish(self, restaurant, menu):
        dish_id = menu["salad"]["id"]
        response = await restaurant.client.delete(f"/api/restaurants/dishes/{dish_id}")

        assert response.status_code == 200
        assert response.json() == {"message": "Dish deleted successfully"}

        remaining = (await restaurant.client.get("/api/restaurants/dishes")).json()["dishes"]
        assert [d["id"] for d in remaining] == [menu["pizza"]["id"]]

    async def test_other_tenant_dish_is_not_found(self, other_restaurant, menu):
        dish_id = menu["pizza"]["id"]

        update = await other_restaurant.client.put(
            f"/api/restaurants/dishes/{dish_id}", json={"price": 1.0}
        )
        delete = await other_restaurant.client.delete(f"/api/restaurants/dishes/{dish_id}")
        listing = await other_restaurant.client.get("/api/restaurants/dishes")

        assert update.status_code == 404
        assert update.json()["message"] == "Dish not found"
        assert delete.status_code == 404
        assert listing.json()["dishes"] == []

    async def test_dish_routes_need_restaurant_role(self, client, customer):
        anonymous = await client.get("/api/restaurants/dishes")
        as_customer = await customer.client.get("/api/restaurants/dishes")

        assert anonymous.status_code == 401
        assert as_customer.status_code == 403
        assert as_customer.json() == {
            "message": "Restaurant access required",
            "code": "AUTHORIZATION_DENIED",
        }


class TestRestaurantBrowsing:
    """Test /api/customers/restaurants (public)"""

    async def test_list_restaurants_is_public(self, client, restaurant, other_restaurant, customer):
        response = await client.get("/api/customers/restaurants")

        assert response.status_code == 200
        names = [r["name"] for r in response.json()["restaurants"]]
        assert names == ["Pizza Palace", "Burger Barn"]

    async def test_search_matches_name_or_description_case_insensitively(
        self, client, restaurant, other_restaurant
    ):
        by_name = await client.get("/api/customers/restaurants", params={"search": "PIZZA"})
        by_description = await client.get("/api/customers/restaurants", params={"search": "shakes"})
        nothing = await client.get("/api/customers/restaurants", params={"search": "sushi"})

        assert [r["name"] for r in by_name.json()["restaurants"]] == ["Pizza Palace"]
        assert [r["name"] for r in by_description.json()["restaurants"]] == ["Burger Barn"]
        assert nothing.json()["restaurants"] == []

    async def test_search_treats_wildcards_literally(self, client, restaurant):
        response = await client.get("/api/customers/restaurants", params={"search": "%"})
        assert response.json()["restaurants"] == []

    async def test_duplicate_names_returned_once(self, client, db, restaurant):
        db.add(
            User(
                name="Pizza Palace",
                email="copy@pizza.example",
                password_hash="x",
                role="restaurant",
                description="Another pizza place",
            )
        )
        await db.commit()

        response = await client.get("/api/customers/restaurants", params={"search": "pizza"})

        restaurants = response.json()["restaurants"]
        assert len(restaurants) == 1
        assert restaurants[0]["id"] == restaurant.id

    async def test_restaurant_details_with_menu(self, client, restaurant, menu):
        response = await client.get(f"/api/customers/restaurants/{restaurant.id}")

        assert response.status_code == 200
        detail = response.json()["restaurant"]
        assert detail["name"] == "Pizza Palace"
        assert detail["timings"] == "Mon-Sun: 11:00 AM - 10:00 PM"
        assert [d["name"] for d in detail["dishes"]] == ["Margherita", "Caesar Salad"]
        assert detail["dishes"][0]["price"] == 10.0
        assert "passwordHash" not in detail

    async def test_restaurant_details_not_found(self, client, customer):
        missing = await client.get("/api/customers/restaurants/424242")
        not_a_restaurant = await client.get(f"/api/customers/restaurants/{customer.id}")

        assert missing.status_code == 404
        assert missing.json()["message"] == "Restaurant not found"
        assert not_a_restaurant.status_code == 404
