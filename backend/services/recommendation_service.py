from typing import Dict, List, Sequence

from injector import inject
from structlog.stdlib import BoundLogger

from domain.entities import MovieRecommendation, RatingsModel, SimilarUser
from domain.interfaces import IRecommendationService
from utils.ranking import rank_descending


class WeightedRecommendationService(IRecommendationService):
    """Predicts a score for each unseen movie as the similarity-weighted
    average of the other users' ratings for it."""

    @inject
    def __init__(self, logger: BoundLogger):
        self.logger = logger

    def recommend(
        self,
        model: RatingsModel,
        user_id: int,
        similar_users: Sequence[SimilarUser],
    ) -> List[MovieRecommendation]:
        target = model.get_user(user_id)
        seen = target.rated_movie_ids()
        similarity_by_user: Dict[int, float] = {
            s.user_id: float(s.similarity) for s in similar_users
        }
        others = [u for u in model.users if u.user_id != target.user_id]

        scored = []
        skipped_unscorable = 0
        for movie in model.movies:
            if movie.movie_id in seen:
                continue

            weighted_sum = 0.0
            similarity_sum = 0.0
            for user in others:
                score = user.score_for(movie.movie_id)
                if score is None:
                    continue
                similarity = similarity_by_user.get(user.user_id)
                if similarity is None:
                    continue
                weighted_sum += score * similarity
                similarity_sum += similarity

            if similarity_sum == 0:
                skipped_unscorable += 1
                continue

            scored.append(
                MovieRecommendation(
                    movie_id=movie.movie_id,
                    title=movie.title,
                    score=weighted_sum / similarity_sum,
                )
            )

        ranked = rank_descending(scored, key=lambda m: m.score)
        self.logger.info(
            "Recommendation scoring completed (weighted average)",
            user_id=user_id,
            candidate_movies=len(model.movies) - len(seen),
            scored_movies=len(ranked),
            unscorable_movies=skipped_unscorable,
            top_score=round(ranked[0].score, 3) if ranked else 0,
        )
        return ranked
