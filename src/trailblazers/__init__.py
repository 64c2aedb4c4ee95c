"""
TrailBlazers backend.

Startup seeding of fauna, plant and state park data plus the API that
serves it.
"""
