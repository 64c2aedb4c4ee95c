"""
FastAPI REST API for TrailBlazers

The application lifespan seeds the database before serving requests.
Currently exposes root and health-check endpoints.
"""
