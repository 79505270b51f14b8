import structlog
from injector import Injector, InstanceProvider, singleton
from structlog.stdlib import BoundLogger

from core.settings import Settings, settings
from domain.entities import RatingsModel
from domain.interfaces import (
    IDatasetRepository,
    IModelBuilderService,
    IRecommendationService,
    ISimilarityService,
)
from repositories.dataset import CsvDatasetRepository
from services.model_builder import ModelBuilderService
from services.recommendation_service import WeightedRecommendationService
from services.similarity_service import EuclideanSimilarityService


def create_injector() -> Injector:
    injector = Injector()
    injector.binder.bind(Settings, to=InstanceProvider(settings))
    injector.binder.bind(IDatasetRepository, to=CsvDatasetRepository)
    injector.binder.bind(
        IModelBuilderService, to=ModelBuilderService, scope=singleton
    )
    injector.binder.bind(
        ISimilarityService, to=EuclideanSimilarityService, scope=singleton
    )
    injector.binder.bind(
        IRecommendationService, to=WeightedRecommendationService, scope=singleton
    )
    injector.binder.bind(
        BoundLogger,
        to=InstanceProvider(structlog.get_logger("movie_recommender")),
    )
    return injector


def bind_model(injector: Injector, model: RatingsModel) -> None:
    """Publish the built model; must run before any request is served."""
    injector.binder.bind(RatingsModel, to=InstanceProvider(model))
