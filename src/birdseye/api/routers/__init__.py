"""
birdseye.api.routers

HTTP routers: health, node mutations (feed side) and fleet queries (render side).
"""
