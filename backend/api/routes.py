from typing import Optional, Union

from fastapi import APIRouter, Depends, Query

from core.service_factories import get_recommendation_manager
from managers.recommendation_manager import RecommendationManager, check_similarity
from schemas.recommendation import (
    RecommendationKind,
    RecommendedMovieItem,
    RecommendedMoviesResponse,
    SimilarUserItem,
    SimilarUsersResponse,
)
from schemas.users import UsersResponse

router = APIRouter()


@router.get("/users/all", response_model=UsersResponse)
def get_all_users(manager: RecommendationManager = Depends(get_recommendation_manager)):
    return UsersResponse(res=manager.list_all_users())


@router.get("/top-matching-users", response_model=SimilarUsersResponse)
def get_top_matching_users(
    user_id: int = Query(..., alias="userId"),
    similarity: str = Query("euclidean"),
    results: Optional[int] = Query(None),
    manager: RecommendationManager = Depends(get_recommendation_manager),
):
    check_similarity(similarity)
    similar = manager.top_similar_users(user_id, results)
    return SimilarUsersResponse(
        user=user_id,
        similarity=similarity,
        results=results,
        data=[
            SimilarUserItem(user_id=s.user_id, name=s.name, similarity=s.similarity)
            for s in similar
        ],
    )


@router.get("/recommended-movies", response_model=RecommendedMoviesResponse)
def get_recommended_movies(
    user_id: int = Query(..., alias="userId"),
    similarity: str = Query("euclidean"),
    results: Optional[int] = Query(None),
    manager: RecommendationManager = Depends(get_recommendation_manager),
):
    check_similarity(similarity)
    movies = manager.top_recommended_movies(user_id, results)
    return RecommendedMoviesResponse(
        user=user_id,
        similarity=similarity,
        results=results,
        data=[
            RecommendedMovieItem(movie=m.title, movie_id=m.movie_id, score=round(m.score, 2))
            for m in movies
        ],
    )


@router.get(
    "/recommendations",
    response_model=Union[SimilarUsersResponse, RecommendedMoviesResponse],
)
def get_recommendations(
    kind: RecommendationKind,
    user_id: int = Query(..., alias="userId"),
    similarity: str = Query("euclidean"),
    results: Optional[int] = Query(None),
    manager: RecommendationManager = Depends(get_recommendation_manager),
):
    if kind == "user":
        return get_top_matching_users(user_id, similarity, results, manager)
    return get_recommended_movies(user_id, similarity, results, manager)
