"""
Domain layer: entities, validators and errors with no framework imports.
"""
