"""
birdseye.services

Service-layer package.

Responsibilities:
- Translate feed records into registry calls.
- Build registries from configuration.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services stay pure Python so they can be tested without the HTTP layer.
