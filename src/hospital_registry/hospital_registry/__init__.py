"""Hospital Registry package.

Feature modules (staff, registry, ...) hold the domain logic; a thin Flask
controller layer exposes it.
"""
