"""
Infrastructure layer.

Implementations of the application ports and the outer surfaces:

- Persistence (SQLAlchemy repositories, full-text indexes)
- Web framework (FastAPI routers and schemas)
- External services (generative text service via pydantic-ai)

This layer depends on domain and application layers,
but they do not depend on it.
"""
