"""
HTTP layer: schemas, routers, dependencies and error handlers.
"""
