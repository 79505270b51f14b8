from abc import ABC, abstractmethod
from typing import List, Sequence

from .entities import (
    MovieRecommendation,
    RatingsModel,
    RawRecord,
    SimilarUser,
    User,
)


class IDatasetRepository(ABC):
    @abstractmethod
    def read_table(self, name: str) -> List[RawRecord]:
        pass


class IModelBuilderService(ABC):
    @abstractmethod
    def build(
        self,
        raw_users: Sequence[RawRecord],
        raw_ratings: Sequence[RawRecord],
        raw_movies: Sequence[RawRecord],
    ) -> RatingsModel:
        pass


class ISimilarityService(ABC):
    @abstractmethod
    def similarity(self, user_a: User, user_b: User) -> float:
        pass

    @abstractmethod
    def similar_users(self, model: RatingsModel, user_id: int) -> List[SimilarUser]:
        pass


class IRecommendationService(ABC):
    @abstractmethod
    def recommend(
        self,
        model: RatingsModel,
        user_id: int,
        similar_users: Sequence[SimilarUser],
    ) -> List[MovieRecommendation]:
        pass
