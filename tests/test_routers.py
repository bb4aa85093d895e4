"""Tests for the recipe scaling and shopping list API routes."""

import httpx
import pytest

from recipecatalog.main import app


def _recipe_payload(recipe) -> dict:
    return recipe.model_dump()


# =============================================================================
# Scaling
# =============================================================================


class TestScaleEndpoint:
    """Tests for POST /api/v1/recipes/scale."""

    def test_scale_recipe(self, client, pancakes):
        """Test a valid scaling request."""
        response = client.post(
            "/api/v1/recipes/scale",
            json={"recipe": _recipe_payload(pancakes), "target_servings": 2},
        )
        assert response.status_code == 200

        data = response.json()
        assert data["recipe_id"] == "recipe-pancakes"
        assert data["is_scaled"] is True
        assert data["scaling_factor"] == 0.5

        flour, milk, eggs, salt, _ = data["ingredients"]
        assert flour["display_quantity"] == 100.0
        assert flour["original_quantity"] == 200.0
        assert milk["display_quantity"] == 0.75
        assert eggs["display_quantity"] == 1.0
        assert salt["display_quantity"] == 1.0
        assert salt["needs_manual_adjustment"] is True

    @pytest.mark.parametrize(
        "target,error",
        [(0, "invalid_servings"), (-1, "invalid_servings"), (150, "servings_out_of_range")],
    )
    def test_rejected_servings(self, client, pancakes, target, error):
        """Test invalid serving counts return an error code."""
        response = client.post(
            "/api/v1/recipes/scale",
            json={"recipe": _recipe_payload(pancakes), "target_servings": target},
        )
        assert response.status_code == 400
        assert response.json()["detail"]["error"] == error

    def test_extra_recipe_fields_ignored(self, client):
        """Test full catalog records are accepted."""
        payload = {
            "recipe": {
                "id": "r9",
                "title": "Toast",
                "servings": 1,
                "description": "Crunchy",
                "steps": ["Toast the bread"],
                "tags": ["breakfast"],
                "isFavorite": True,
                "ingredients": [
                    {"name": "bread", "quantity": 2, "unit": "slice", "scalable": True}
                ],
            },
            "target_servings": 3,
        }
        response = client.post("/api/v1/recipes/scale", json=payload)
        assert response.status_code == 200
        assert response.json()["ingredients"][0]["display_quantity"] == 6.0

    @pytest.mark.parametrize("target", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_target_rejected(self, client, pancakes, target):
        """Test NaN and infinite targets never reach the scaler."""
        response = client.post(
            "/api/v1/recipes/scale",
            json={"recipe": _recipe_payload(pancakes), "target_servings": target},
        )
        assert response.status_code == 422

    def test_infinite_quantity_rejected(self, client):
        """Test infinite ingredient quantities fail schema validation."""
        payload = {
            "recipe": {
                "id": "r9",
                "servings": 1,
                "ingredients": [{"name": "rice", "quantity": "Infinity", "unit": "g"}],
            },
            "target_servings": 2,
        }
        response = client.post("/api/v1/recipes/scale", json=payload)
        assert response.status_code == 422

    def test_negative_quantity_rejected(self, client):
        """Test malformed ingredients fail schema validation."""
        payload = {
            "recipe": {
                "id": "r9",
                "servings": 1,
                "ingredients": [{"name": "bread", "quantity": -2, "unit": "slice"}],
            },
            "target_servings": 3,
        }
        response = client.post("/api/v1/recipes/scale", json=payload)
        assert response.status_code == 422


# =============================================================================
# Shopping List
# =============================================================================


class TestShoppingListEndpoint:
    """Tests for POST /api/v1/shopping-list."""

    def test_empty(self, client):
        """Test no recipes gives an empty list."""
        response = client.post("/api/v1/shopping-list", json={"recipes": []})
        assert response.status_code == 200
        assert response.json() == {"recipe_count": 0, "item_count": 0, "categories": []}

    def test_categories(self, client, pancakes, carbonara):
        """Test only non-empty categories are returned, in display order."""
        response = client.post(
            "/api/v1/shopping-list",
            json={"recipes": [_recipe_payload(pancakes), _recipe_payload(carbonara)]},
        )
        assert response.status_code == 200

        data = response.json()
        assert data["recipe_count"] == 2
        assert [group["category"] for group in data["categories"]] == [
            "Produce",
            "Dairy & Eggs",
            "Meat & Seafood",
            "Pantry",
            "Spices & Seasonings",
        ]

        dairy = data["categories"][1]["items"]
        eggs = dairy[0]
        assert eggs["name"] == "eggs"
        assert eggs["quantity"] == 5.0
        assert eggs["display_quantity"] == "5"
        assert eggs["recipe_ids"] == ["recipe-pancakes", "recipe-carbonara"]
        assert eggs["identity"] == ["eggs", "whole", "Dairy & Eggs"]

    def test_export(self, client, tomato_recipes):
        """Test the text export download."""
        response = client.post(
            "/api/v1/shopping-list/export",
            json={"recipes": [_recipe_payload(recipe) for recipe in tomato_recipes]},
        )
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "shopping-list.txt" in response.headers["content-disposition"]
        assert response.text == (
            "SHOPPING LIST\n"
            + "=" * 40
            + "\n\nGenerated from 2 recipe(s)\n\nPRODUCE\n-------\n☐ 3 cup tomato\n\n"
        )


    def test_export_large_quantity(self, client):
        """Test quantities beyond decimal precision still export."""
        recipe = {
            "id": "bulk",
            "title": "Bulk Rice",
            "servings": 4,
            "ingredients": [{"name": "rice", "quantity": 1e27, "unit": "g"}],
        }
        response = client.post("/api/v1/shopping-list/export", json={"recipes": [recipe]})
        assert response.status_code == 200
        assert "☐ 1e+27 g rice\n" in response.text

    def test_request_id_echoed(self, client):
        """Test the request id header is returned, or generated when missing."""
        response = client.post(
            "/api/v1/shopping-list", json={"recipes": []}, headers={"X-Request-ID": "req-42"}
        )
        assert response.headers["X-Request-ID"] == "req-42"

        response = client.post("/api/v1/shopping-list", json={"recipes": []})
        assert len(response.headers["X-Request-ID"]) == 32

@pytest.mark.asyncio
async def test_shopping_list_async_client(tomato_recipes) -> None:
    """Test the shopping list endpoint through an async client."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post(
            "/api/v1/shopping-list",
            json={"recipes": [_recipe_payload(recipe) for recipe in tomato_recipes]},
        )

    assert response.status_code == 200
    assert response.json()["item_count"] == 1
