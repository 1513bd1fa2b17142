"""
Infrastructure layer.

SQLAlchemy adapters for the repository ports, plus the FastAPI routers and
pydantic schemas that expose the services over HTTP.
"""
