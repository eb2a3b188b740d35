"""
Tests for /recommendations endpoints.

- Happy path: valid form -> 200 with recommendations
- Validation: unknown soil type / season, blank location -> 422
- Failure mapping: disabled -> 503, upstream errors -> 502
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from maharishi.main import app
from maharishi.schemas.recommendations import CropRecommendation
from maharishi.services.recommendation_service import (
    RecommendationAuthError,
    RecommendationNetworkError,
    RecommendationRequestError,
    RecommendationSchemaError,
    RecommendationUnavailableError,
)
from maharishi.utils.constants import (
    AI_DISABLED_MESSAGE,
    RECOMMENDATION_ERROR_MESSAGE,
    SEASONS,
    SOIL_TYPES,
)

SERVICE_PATH = "maharishi.routes.recommendations.get_recommendations"

VALID_REQUEST = {
    "location": "261001",
    "soil_type": "Alluvial",
    "season": "Rabi (Winter)",
}


@pytest.fixture
def client():
    """Create test client for FastAPI app."""
    return TestClient(app)


@pytest.fixture
def wheat():
    return CropRecommendation(
        crop="Wheat",
        reason="Alluvial soil holds moisture well for a winter wheat crop.",
        expected_yield_kg_per_acre="1800-2200 kg",
        expected_profit_inr="₹40,000 - ₹55,000",
    )


class TestRecommendationOptions:

    def test_options(self, client):
        response = client.get("/recommendations/options")

        assert response.status_code == 200
        assert response.json() == {"soil_types": SOIL_TYPES, "seasons": SEASONS}


class TestRecommendCrops:

    def test_success(self, client, wheat):
        with patch(SERVICE_PATH, new=AsyncMock(return_value=[wheat])) as mock_service:
            response = client.post("/recommendations/crops", json=VALID_REQUEST)

        assert response.status_code == 200
        data = response.json()
        assert data["recommendations"] == [wheat.model_dump()]
        mock_service.assert_awaited_once_with(
            location="261001", soil_type="Alluvial", season="Rabi (Winter)"
        )

    def test_empty_result(self, client):
        with patch(SERVICE_PATH, new=AsyncMock(return_value=[])):
            response = client.post("/recommendations/crops", json=VALID_REQUEST)

        assert response.status_code == 200
        assert response.json() == {"recommendations": []}

    @pytest.mark.parametrize("field,value", [
        ("soil_type", "Volcanic"),
        ("season", "Winter"),
        ("location", "   "),
        ("location", ""),
    ])
    def test_invalid_form_rejected(self, client, field, value):
        payload = dict(VALID_REQUEST, **{field: value})

        with patch(SERVICE_PATH, new=AsyncMock()) as mock_service:
            response = client.post("/recommendations/crops", json=payload)

        assert response.status_code == 422
        assert response.json()["error"] == "validation_error"
        mock_service.assert_not_awaited()

    def test_missing_field_rejected(self, client):
        response = client.post("/recommendations/crops", json={"location": "261001"})
        assert response.status_code == 422

    def test_ai_disabled(self, client):
        with patch(SERVICE_PATH, new=AsyncMock(side_effect=RecommendationUnavailableError())):
            response = client.post("/recommendations/crops", json=VALID_REQUEST)

        assert response.status_code == 503
        assert response.json()["detail"] == {"error": "ai_disabled", "details": AI_DISABLED_MESSAGE}

    @pytest.mark.parametrize("error,code", [
        (RecommendationAuthError(), "upstream_auth_error"),
        (RecommendationNetworkError(), "upstream_unavailable"),
        (RecommendationSchemaError(), "upstream_invalid_response"),
        (RecommendationRequestError(), "recommendation_failed"),
    ])
    def test_upstream_failures(self, client, error, code):
        with patch(SERVICE_PATH, new=AsyncMock(side_effect=error)):
            response = client.post("/recommendations/crops", json=VALID_REQUEST)

        assert response.status_code == 502
        assert response.json()["detail"] == {"error": code, "details": RECOMMENDATION_ERROR_MESSAGE}
