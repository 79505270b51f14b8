from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

RecommendationKind = Literal["user", "movie"]


class SimilarUserItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(alias="userId")
    name: str
    similarity: float


class RecommendedMovieItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    movie: str
    movie_id: int = Field(alias="movieId")
    score: float = Field(description="Predicted rating, rounded to 2 decimals.")


class QueryEcho(BaseModel):
    user: int
    similarity: str
    results: Optional[int] = None


class SimilarUsersResponse(QueryEcho):
    data: List[SimilarUserItem]


class RecommendedMoviesResponse(QueryEcho):
    data: List[RecommendedMovieItem]
