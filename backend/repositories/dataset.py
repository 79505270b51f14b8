from pathlib import Path
from typing import Dict, List, Tuple

import pandas as pd
from injector import inject
from structlog.stdlib import BoundLogger

from core.settings import Settings
from domain.entities import RawRecord
from domain.errors import DataIntegrityError
from domain.interfaces import IDatasetRepository

TABLE_COLUMNS: Dict[str, Tuple[str, ...]] = {
    "users": ("UserId", "Name"),
    "movies": ("MovieId", "Title"),
    "ratings": ("UserId", "MovieId", "Rating"),
}


class CsvDatasetRepository(IDatasetRepository):
    """Reads the users, movies and ratings tables from ``<data_dir>/<name>.csv``.

    Every field is kept as a string; numeric parsing is the model builder's job.
    """

    @inject
    def __init__(self, settings: Settings, logger: BoundLogger):
        self.data_dir = Path(settings.data_dir)
        self.separator = settings.csv_separator
        self.logger = logger

    def read_table(self, name: str) -> List[RawRecord]:
        if name not in TABLE_COLUMNS:
            raise ValueError(f"Unknown table: {name}")
        path = self.data_dir / f"{name}.csv"
        self.logger.info("Reading dataset table", table=name, path=str(path))
        df = pd.read_csv(
            path,
            sep=self.separator,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
        )
        missing = [c for c in TABLE_COLUMNS[name] if c not in df.columns]
        if missing:
            raise DataIntegrityError(f"{name}.csv missing columns: {missing}")
        records = df.to_dict("records")
        self.logger.info("Dataset table loaded", table=name, rows=len(records))
        return records
