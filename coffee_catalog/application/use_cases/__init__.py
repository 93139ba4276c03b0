from .recommend_coffee import RecommendCoffeeUseCase, RecommendationOutcome

__all__ = ["RecommendCoffeeUseCase", "RecommendationOutcome"]
