"""
Tests for the /api/recipes endpoints.
"""


def test_adjust_recipe(client):
    response = client.post("/api/recipes/adjust", json={
        "ingredients": [
            {"item": "milk", "amount": "1 cup", "category": "dairy"},
            {"item": "sugar", "amount": "100 g", "category": "other", "notes": "caster"},
            {"item": "eggs", "amount": "2", "category": "protein"},
        ],
        "multiplier": 2,
        "unit_system": "metric",
    })
    assert response.status_code == 200
    data = response.json()
    amounts = [ing["amount"] for ing in data["ingredients"]]
    assert amounts == ["480 ml", "200 g", "4"]
    # Extra keys survive the round trip
    assert data["ingredients"][1]["notes"] == "caster"
    assert data["unit_system"] == "metric"


def test_adjust_recipe_default_system(client):
    response = client.post("/api/recipes/adjust", json={
        "ingredients": [{"item": "water", "amount": "1 L"}],
    })
    assert response.status_code == 200
    data = response.json()
    assert data["unit_system"] == "us"
    assert data["ingredients"][0]["amount"] == "1 quart"
    assert data["ingredients"][0]["category"] == "other"


def test_adjust_recipe_requires_ingredients(client):
    response = client.post("/api/recipes/adjust", json={"ingredients": [], "multiplier": 2})
    assert response.status_code == 400


def test_scale_plan(client):
    response = client.post("/api/recipes/scale-plan", json={
        "recipe_name": "Chili",
        "original_servings": 4,
        "target_servings": 12,
        "prep_time": 20,
        "cook_time": 60,
    })
    assert response.status_code == 200
    data = response.json()
    assert data["scale_factor"] == 3
    assert data["prep"]["adjusted"] == 22
    assert data["cook"]["adjusted"] == 69
    assert data["adjustments"]["batch_cooking_recommended"] is True
    assert "Scaling Complete" in data["message"]


def test_scale_plan_validation(client):
    response = client.post("/api/recipes/scale-plan", json={
        "original_servings": 4,
        "target_servings": 80,
    })
    assert response.status_code == 422


def test_scale_plan_zero_original_servings(client):
    response = client.post("/api/recipes/scale-plan", json={
        "original_servings": 0,
        "target_servings": 4,
    })
    assert response.status_code == 422
