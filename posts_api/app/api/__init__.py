"""
API package containing the post routes.

``router`` aggregates the endpoint routers; ``deps`` provides the
dependencies (store, logger, request logging) they share.
"""
