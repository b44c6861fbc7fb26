from .server import create_app, InMemoryArticleSource, HealthResponse

__all__ = ['create_app', 'InMemoryArticleSource', 'HealthResponse']
