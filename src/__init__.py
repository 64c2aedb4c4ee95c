"""
TrailBlazers - Core Package

This package contains the backend for the TrailBlazers state park explorer,
including the startup data seeding pipeline, persistence layer and API.
"""

__version__ = "0.1.0"
