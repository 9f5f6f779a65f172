"""adaptive-views: domain-aware view resolution for FastAPI."""
