import pytest
from fastapi.testclient import TestClient

from core.main import app
from core.service_factories import get_recommendation_manager
from core.settings import settings
from tests.conftest import EXAMPLE_DATA_ROOT


@pytest.fixture(autouse=True)
def clear_overrides():
    yield
    app.dependency_overrides = {}


class TestAPIEndpoints:
    """Test suite for API endpoints."""

    @pytest.fixture
    def client(self, recommendation_manager):
        """Create a test client backed by the example ratings."""
        app.dependency_overrides[get_recommendation_manager] = lambda: recommendation_manager
        return TestClient(app)

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_all_users(self, client):
        # Act
        response = client.get("/users/all")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["msg"] == "All users"
        assert data["res"][6] == {"UserId": "7", "Name": "Toby"}

    def test_top_matching_users(self, client):
        # Act
        response = client.get(
            "/top-matching-users", params={"userId": 7, "similarity": "euclidean", "results": 3}
        )

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["user"] == 7
        assert data["similarity"] == "euclidean"
        assert data["results"] == 3
        assert data["data"] == [
            {"userId": 5, "name": "Mick", "similarity": 0.31},
            {"userId": 3, "name": "Mike", "similarity": 0.29},
            {"userId": 4, "name": "Claudia", "similarity": 0.24},
        ]

    def test_recommended_movies(self, client):
        # Act
        response = client.get("/recommended-movies", params={"userId": 7, "results": 10})

        # Assert
        assert response.status_code == 200
        assert response.json()["data"] == [
            {"movie": "The Night Listener", "movieId": 6, "score": 3.5},
            {"movie": "Lady in the Water", "movieId": 1, "score": 2.76},
            {"movie": "Just My Luck", "movieId": 3, "score": 2.46},
        ]

    def test_recommendations_by_kind(self, client):
        users = client.get("/recommendations", params={"kind": "user", "userId": 7, "results": 1})
        movies = client.get("/recommendations", params={"kind": "movie", "userId": 7, "results": 1})

        assert users.status_code == 200
        assert users.json()["data"][0]["userId"] == 5
        assert movies.status_code == 200
        assert movies.json()["data"][0]["movieId"] == 6

    def test_recommendations_unknown_kind(self, client):
        response = client.get("/recommendations", params={"kind": "genre", "userId": 7})

        assert response.status_code == 422

    def test_unknown_user_is_not_found(self, client):
        response = client.get("/top-matching-users", params={"userId": 99, "results": 3})

        assert response.status_code == 404
        assert "99" in response.json()["detail"]

    def test_negative_results_is_bad_request(self, client):
        response = client.get("/recommended-movies", params={"userId": 7, "results": -1})

        assert response.status_code == 400

    def test_non_numeric_results_fails_validation(self, client):
        response = client.get("/top-matching-users", params={"userId": 7, "results": "ten"})

        assert response.status_code == 422

    def test_unsupported_similarity_is_bad_request(self, client):
        response = client.get(
            "/top-matching-users", params={"userId": 7, "similarity": "pearson"}
        )

        assert response.status_code == 400

    def test_unknown_path(self, client):
        assert client.get("/movies/all").status_code == 404


class TestApplicationStartup:
    """The model is built from CSV files before the first request is served."""

    def test_serves_example_dataset(self, monkeypatch):
        # Arrange
        monkeypatch.setattr(settings, "data_root", EXAMPLE_DATA_ROOT)
        monkeypatch.setattr(settings, "data_folder", "example")

        # Act
        with TestClient(app) as client:
            assert app.state.is_ready is True
            response = client.get("/recommended-movies", params={"userId": 7, "results": 1})

        # Assert
        assert response.status_code == 200
        assert response.json()["data"] == [
            {"movie": "The Night Listener", "movieId": 6, "score": 3.5}
        ]
