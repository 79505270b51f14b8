from typing import List, Optional

from structlog.stdlib import BoundLogger

from domain.entities import MovieRecommendation, RatingsModel, RawRecord, SimilarUser
from domain.errors import InvalidArgumentError
from domain.interfaces import IRecommendationService, ISimilarityService
from utils.ranking import top_n

SUPPORTED_SIMILARITIES = ("euclidean",)


def parse_user_id(value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"User id must be an integer, got {value!r}") from None


def parse_result_count(value) -> Optional[int]:
    """``None`` means no cut; any count past the end yields the whole list."""
    if value is None:
        return None
    try:
        count = int(value)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"Result count must be an integer, got {value!r}") from None
    if count < 0:
        raise InvalidArgumentError(f"Result count must not be negative, got {count}")
    return count


def check_similarity(name: str) -> str:
    if name not in SUPPORTED_SIMILARITIES:
        raise InvalidArgumentError(
            f"Unsupported similarity {name!r}, expected one of {list(SUPPORTED_SIMILARITIES)}"
        )
    return name


class RecommendationManager:
    """Query boundary over the built ratings model."""

    def __init__(
        self,
        model: RatingsModel,
        similarity: ISimilarityService,
        recommender: IRecommendationService,
        logger: BoundLogger,
    ):
        self.model = model
        self.similarity = similarity
        self.recommender = recommender
        self.logger = logger

    def list_all_users(self) -> List[RawRecord]:
        return list(self.model.raw_users)

    def top_similar_users(self, user_id, result_count) -> List[SimilarUser]:
        user_id = parse_user_id(user_id)
        result_count = parse_result_count(result_count)
        self.logger.info("Finding similar users", user_id=user_id, results=result_count)

        similar = self.similarity.similar_users(self.model, user_id)
        return top_n(similar, result_count)

    def top_recommended_movies(self, user_id, result_count) -> List[MovieRecommendation]:
        user_id = parse_user_id(user_id)
        result_count = parse_result_count(result_count)
        self.logger.info("Starting recommendation process", user_id=user_id, results=result_count)

        similar = self.similarity.similar_users(self.model, user_id)
        recommendations = self.recommender.recommend(self.model, user_id, similar)
        top = top_n(recommendations, result_count)
        self.logger.info(
            "Recommendation process completed",
            user_id=user_id,
            available=len(recommendations),
            returned=len(top),
        )
        return top
