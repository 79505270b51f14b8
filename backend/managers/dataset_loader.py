import asyncio

from structlog.stdlib import BoundLogger

from domain.entities import RatingsModel, RawDataset
from domain.interfaces import IDatasetRepository, IModelBuilderService


class DatasetLoader:
    def __init__(
        self,
        repository: IDatasetRepository,
        builder: IModelBuilderService,
        logger: BoundLogger,
    ):
        self.repository = repository
        self.builder = builder
        self.logger = logger

    async def load_raw(self) -> RawDataset:
        """Read the three raw tables concurrently."""
        users, movies, ratings = await asyncio.gather(
            asyncio.to_thread(self.repository.read_table, "users"),
            asyncio.to_thread(self.repository.read_table, "movies"),
            asyncio.to_thread(self.repository.read_table, "ratings"),
        )
        return RawDataset(users=users, movies=movies, ratings=ratings)

    async def load_model(self) -> RatingsModel:
        """Load the raw tables, then resolve them into the ratings model.

        Resolution starts only once all three tables are available.
        """
        self.logger.info("Loading dataset")
        raw = await self.load_raw()
        model = self.builder.build(raw.users, raw.ratings, raw.movies)
        if model.integrity_errors:
            self.logger.warning(
                "Dataset loaded with integrity errors",
                count=len(model.integrity_errors),
                first=model.integrity_errors[0],
            )
        return model
