from pathlib import Path
from unittest.mock import MagicMock

import pytest
from structlog.stdlib import BoundLogger

from domain.entities import RatingsModel
from managers.recommendation_manager import RecommendationManager
from services.model_builder import ModelBuilderService
from services.recommendation_service import WeightedRecommendationService
from services.similarity_service import EuclideanSimilarityService

EXAMPLE_DATA_ROOT = Path(__file__).resolve().parents[2] / "data"


def make_users(*users):
    return [{"UserId": str(user_id), "Name": name} for user_id, name in users]


def make_movies(*movies):
    return [{"MovieId": str(movie_id), "Title": title} for movie_id, title in movies]


def make_ratings(*ratings):
    return [
        {"UserId": str(user_id), "MovieId": str(movie_id), "Rating": str(score)}
        for user_id, movie_id, score in ratings
    ]


@pytest.fixture
def mock_logger() -> BoundLogger:
    """Create a mock logger for testing."""
    logger = MagicMock(spec=BoundLogger)
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    return logger


@pytest.fixture
def model_builder(mock_logger) -> ModelBuilderService:
    return ModelBuilderService(logger=mock_logger)


@pytest.fixture
def similarity_service(mock_logger) -> EuclideanSimilarityService:
    return EuclideanSimilarityService(logger=mock_logger)


@pytest.fixture
def recommendation_service(mock_logger) -> WeightedRecommendationService:
    return WeightedRecommendationService(logger=mock_logger)


@pytest.fixture
def identical_raters_model(model_builder) -> RatingsModel:
    """Users 1 and 2 rate both movies identically; user 3 rates nothing."""
    return model_builder.build(
        make_users((1, "Alice"), (2, "Bob"), (3, "Carol")),
        make_ratings((1, 1, 5), (1, 2, 3), (2, 1, 5), (2, 2, 3)),
        make_movies((1, "Alien"), (2, "Brazil")),
    )


@pytest.fixture
def single_overlap_model(model_builder) -> RatingsModel:
    """User 1 rates A=4; user 2 rates A=2 and B=5."""
    return model_builder.build(
        make_users((1, "Alice"), (2, "Bob")),
        make_ratings((1, 1, 4), (2, 1, 2), (2, 2, 5)),
        make_movies((1, "Amelie"), (2, "Blade Runner")),
    )


@pytest.fixture
def critics_model(model_builder) -> RatingsModel:
    """The example dataset shipped in data/example."""
    return model_builder.build(
        make_users(
            (1, "Lisa"), (2, "Gene"), (3, "Mike"), (4, "Claudia"),
            (5, "Mick"), (6, "Jack"), (7, "Toby"),
        ),
        make_ratings(
            (1, 1, 2.5), (1, 2, 3.5), (1, 3, 3.0), (1, 4, 3.5), (1, 5, 2.5), (1, 6, 3.0),
            (2, 1, 3.0), (2, 2, 3.5), (2, 3, 1.5), (2, 4, 5.0), (2, 5, 3.5), (2, 6, 3.0),
            (3, 1, 2.5), (3, 2, 3.0), (3, 4, 3.5), (3, 6, 4.0),
            (4, 2, 3.5), (4, 3, 3.0), (4, 4, 4.0), (4, 5, 2.5), (4, 6, 4.5),
            (5, 1, 3.0), (5, 2, 4.0), (5, 3, 2.0), (5, 4, 3.0), (5, 5, 2.0), (5, 6, 3.0),
            (6, 1, 3.0), (6, 2, 4.0), (6, 4, 5.0), (6, 5, 3.5), (6, 6, 3.0),
            (7, 2, 4.5), (7, 4, 4.0), (7, 5, 1.0),
        ),
        make_movies(
            (1, "Lady in the Water"), (2, "Snakes on a Plane"), (3, "Just My Luck"),
            (4, "Superman Returns"), (5, "You, Me and Dupree"), (6, "The Night Listener"),
        ),
    )


@pytest.fixture
def recommendation_manager(
    critics_model, similarity_service, recommendation_service, mock_logger
) -> RecommendationManager:
    return RecommendationManager(
        model=critics_model,
        similarity=similarity_service,
        recommender=recommendation_service,
        logger=mock_logger,
    )
