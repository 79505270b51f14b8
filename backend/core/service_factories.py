from fastapi_injector import Injected
from injector import Injector
from structlog.stdlib import BoundLogger

from domain.entities import RatingsModel
from domain.interfaces import (
    IDatasetRepository,
    IModelBuilderService,
    IRecommendationService,
    ISimilarityService,
)
from managers.dataset_loader import DatasetLoader
from managers.recommendation_manager import RecommendationManager


def get_recommendation_manager(
    model: RatingsModel = Injected(RatingsModel),
    similarity: ISimilarityService = Injected(ISimilarityService),
    recommender: IRecommendationService = Injected(IRecommendationService),
    logger: BoundLogger = Injected(BoundLogger),
) -> RecommendationManager:
    return RecommendationManager(
        model=model,
        similarity=similarity,
        recommender=recommender,
        logger=logger,
    )


def get_dataset_loader(injector: Injector) -> DatasetLoader:
    return DatasetLoader(
        repository=injector.get(IDatasetRepository),
        builder=injector.get(IModelBuilderService),
        logger=injector.get(BoundLogger),
    )
