from linkedin_optimizer.api import (
    linkedin_routes,
    llm_routes,
)

__all__ = [
    "linkedin_routes",
    "llm_routes",
]
