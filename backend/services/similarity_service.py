from typing import List

import numpy as np
from injector import inject
from structlog.stdlib import BoundLogger

from domain.entities import RatingsModel, SimilarUser, User
from domain.interfaces import ISimilarityService
from utils.ranking import rank_descending


class EuclideanSimilarityService(ISimilarityService):
    @inject
    def __init__(self, logger: BoundLogger):
        self.logger = logger

    def similarity(self, user_a: User, user_b: User) -> float:
        scores_b = {r.movie_id: r.score for r in user_b.ratings}
        shared = [(r.score, scores_b[r.movie_id]) for r in user_a.ratings if r.movie_id in scores_b]
        if not shared:
            # no comparable basis
            return 0
        pairs = np.array(shared, dtype=float)
        sum_squares = float(np.sum((pairs[:, 0] - pairs[:, 1]) ** 2))
        return round(1 / (1 + sum_squares), 2)

    def similar_users(self, model: RatingsModel, user_id: int) -> List[SimilarUser]:
        target = model.get_user(user_id)
        scored = [
            SimilarUser(
                user_id=other.user_id,
                name=other.name,
                similarity=self.similarity(target, other),
            )
            for other in model.users
            if other.user_id != target.user_id
        ]
        ranked = rank_descending(scored, key=lambda s: s.similarity)
        self.logger.info(
            "Similarity scoring completed",
            user_id=user_id,
            compared_users=len(ranked),
            top_similarity=ranked[0].similarity if ranked else 0,
        )
        return ranked
