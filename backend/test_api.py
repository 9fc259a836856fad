"""Tests for the HTTP endpoints"""
import pytest
from fastapi.testclient import TestClient

from main import app
from test_models import GENERATED_RECIPE


@pytest.fixture
def client():
    return TestClient(app)


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "version" in response.json()


def test_health_lists_tables(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["density_keys"][0] == "flour"
    assert data["units"] == ["oz", "lb", "cup", "tbsp", "tsp"]


def test_convert_ingredient(client):
    response = client.post(
        "/convert/ingredient",
        json={"text": "8 oz chicken breast", "unit_system": "metric"},
    )
    assert response.status_code == 200
    assert response.json() == {
        "original": "8 oz chicken breast",
        "converted": "227g chicken breast",
    }


def test_convert_instruction(client):
    response = client.post(
        "/convert/instruction",
        json={"text": "Bake at 400 degrees F for 20 minutes.", "temp_unit": "c"},
    )
    assert response.status_code == 200
    assert response.json()["converted"] == "Bake at 205°C for 20 minutes."


@pytest.mark.parametrize("path, payload", [
    ("/convert/ingredient", {"text": "8 oz chicken breast", "unit_system": "imperial"}),
    ("/convert/instruction", {"text": "350°F", "temp_unit": "kelvin"}),
    ("/recipe/convert", {"recipe": GENERATED_RECIPE, "unit_system": "metric", "temp_unit": "k"}),
])
def test_unknown_selectors_are_rejected(client, path, payload):
    response = client.post(path, json=payload)
    assert response.status_code == 422


def test_convert_recipe(client):
    response = client.post(
        "/recipe/convert",
        json={"recipe": GENERATED_RECIPE, "unit_system": "metric", "temp_unit": "c"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["recipeName"] == "Garlic Butter Chicken"
    assert data["ingredients"]["needed"] == ["227g butter", "15ml olive oil"]
    assert data["instructions"][0] == "Preheat oven to 205°C."
    assert "id" not in data


def test_convert_saved_recipe_keeps_id(client):
    saved = dict(GENERATED_RECIPE, id="42", imageUrl="https://example.com/chicken.jpg")
    response = client.post(
        "/recipe/convert",
        json={"recipe": saved, "unit_system": "metric", "temp_unit": "f"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == "42"
    assert data["imageUrl"] == "https://example.com/chicken.jpg"
    assert data["instructions"] == GENERATED_RECIPE["instructions"]


def test_out_of_range_numbers_come_back_unchanged(client):
    huge = "1" + "0" * 400
    response = client.post(
        "/convert/ingredient",
        json={"text": f"{huge} cups water", "unit_system": "metric"},
    )
    assert response.status_code == 200
    assert response.json()["converted"] == f"{huge} cups water"

    response = client.post(
        "/convert/instruction",
        json={"text": f"Heat to {huge}°F", "temp_unit": "c"},
    )
    assert response.status_code == 200
    assert response.json()["converted"] == f"Heat to {huge}°F"


def test_convert_recipe_with_null_lists(client):
    payload = dict(GENERATED_RECIPE, instructions=None, ingredients={"provided": None, "needed": ["8 oz beef"]})
    response = client.post(
        "/recipe/convert",
        json={"recipe": payload, "unit_system": "metric", "temp_unit": "c"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["instructions"] == []
    assert data["ingredients"] == {"provided": [], "needed": ["227g beef"]}
