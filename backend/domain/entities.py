from dataclasses import dataclass
from typing import List, Mapping, Optional, Tuple

from domain.errors import NotFoundError

RawRecord = Mapping[str, str]


@dataclass(frozen=True)
class Rating:
    movie_id: int
    movie_title: str
    score: float


@dataclass(frozen=True)
class User:
    user_id: int
    name: str
    ratings: Tuple[Rating, ...]

    def rated_movie_ids(self) -> frozenset:
        return frozenset(r.movie_id for r in self.ratings)

    def score_for(self, movie_id: int) -> Optional[float]:
        for rating in self.ratings:
            if rating.movie_id == movie_id:
                return rating.score
        return None


@dataclass(frozen=True)
class Movie:
    movie_id: int
    title: str


@dataclass(frozen=True, eq=False)
class RatingsModel:
    """Immutable in-memory graph of users, their ratings and the movie table.

    ``users_by_id`` is built once alongside ``users`` so that the engines
    never rely on an identifier matching a position in ``users``.
    """

    users: Tuple[User, ...]
    users_by_id: Mapping[int, User]
    movies: Tuple[Movie, ...]
    raw_users: Tuple[RawRecord, ...] = ()
    integrity_errors: Tuple[str, ...] = ()

    def get_user(self, user_id: int) -> User:
        user = self.users_by_id.get(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")
        return user


@dataclass(frozen=True)
class RawDataset:
    users: List[RawRecord]
    movies: List[RawRecord]
    ratings: List[RawRecord]


@dataclass(frozen=True)
class SimilarUser:
    user_id: int
    name: str
    similarity: float


@dataclass(frozen=True)
class MovieRecommendation:
    movie_id: int
    title: str
    score: float
