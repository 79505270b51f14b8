import math
from collections import defaultdict
from types import MappingProxyType
from typing import Dict, List, Sequence, Tuple

from injector import inject
from structlog.stdlib import BoundLogger

from domain.entities import Movie, Rating, RatingsModel, RawRecord, User
from domain.errors import DataIntegrityError
from domain.interfaces import IModelBuilderService


def parse_int(record: RawRecord, field: str, table: str) -> int:
    value = record.get(field)
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise DataIntegrityError(
            f"{table}: field {field!r} is not an integer: {value!r}"
        ) from None


def parse_score(record: RawRecord, table: str) -> float:
    value = record.get("Rating")
    try:
        score = float(str(value).strip())
    except (TypeError, ValueError):
        raise DataIntegrityError(
            f"{table}: field 'Rating' is not numeric: {value!r}"
        ) from None
    if not math.isfinite(score):
        raise DataIntegrityError(
            f"{table}: field 'Rating' is not a finite number: {value!r}"
        )
    return score


class ModelBuilderService(IModelBuilderService):
    @inject
    def __init__(self, logger: BoundLogger):
        self.logger = logger

    def build(
        self,
        raw_users: Sequence[RawRecord],
        raw_ratings: Sequence[RawRecord],
        raw_movies: Sequence[RawRecord],
    ) -> RatingsModel:
        self.logger.info(
            "Building ratings model",
            users=len(raw_users),
            movies=len(raw_movies),
            ratings=len(raw_ratings),
        )
        problems: List[str] = []

        movies = self._build_movie_table(raw_movies)
        titles = {m.movie_id: m.title for m in movies}

        # Group ratings by user id once, keeping their original order.
        ratings_by_user: Dict[int, List[Tuple[int, float]]] = defaultdict(list)
        for raw in raw_ratings:
            ratings_by_user[parse_int(raw, "UserId", "ratings")].append(
                (parse_int(raw, "MovieId", "ratings"), parse_score(raw, "ratings"))
            )

        users: List[User] = []
        users_by_id: Dict[int, User] = {}
        for raw in raw_users:
            user_id = parse_int(raw, "UserId", "users")
            if user_id in users_by_id:
                raise DataIntegrityError(f"users: duplicate UserId {user_id}")
            ratings = self._build_ratings(
                user_id, ratings_by_user.get(user_id, []), titles, problems
            )
            user = User(user_id=user_id, name=raw.get("Name", ""), ratings=ratings)
            users.append(user)
            users_by_id[user_id] = user

        for user_id in ratings_by_user:
            if user_id not in users_by_id:
                self._report(problems, f"ratings reference unknown UserId {user_id}")

        model = RatingsModel(
            users=tuple(users),
            users_by_id=MappingProxyType(users_by_id),
            movies=movies,
            raw_users=tuple(raw_users),
            integrity_errors=tuple(problems),
        )
        self.logger.info(
            "Ratings model built",
            users=len(model.users),
            movies=len(model.movies),
            ratings=sum(len(u.ratings) for u in model.users),
            integrity_errors=len(problems),
        )
        return model

    def _build_movie_table(self, raw_movies: Sequence[RawRecord]) -> Tuple[Movie, ...]:
        movies: Dict[int, Movie] = {}
        for raw in raw_movies:
            movie_id = parse_int(raw, "MovieId", "movies")
            if movie_id in movies:
                # first match wins
                self.logger.warning("Duplicate MovieId ignored", movie_id=movie_id)
                continue
            movies[movie_id] = Movie(movie_id=movie_id, title=raw.get("Title", ""))
        return tuple(movies.values())

    def _build_ratings(
        self,
        user_id: int,
        raw: List[Tuple[int, float]],
        titles: Dict[int, str],
        problems: List[str],
    ) -> Tuple[Rating, ...]:
        ratings: List[Rating] = []
        seen = set()
        for movie_id, score in raw:
            if movie_id not in titles:
                self._report(
                    problems,
                    f"rating by UserId {user_id} references unknown MovieId {movie_id}",
                )
                continue
            if movie_id in seen:
                self._report(
                    problems,
                    f"duplicate rating by UserId {user_id} for MovieId {movie_id}",
                )
                continue
            seen.add(movie_id)
            ratings.append(Rating(movie_id=movie_id, movie_title=titles[movie_id], score=score))
        return tuple(ratings)

    def _report(self, problems: List[str], message: str) -> None:
        error = DataIntegrityError(message)
        problems.append(str(error))
        self.logger.warning("Skipping rating", error=str(error))
