"""
Core utilities shared across the Imoveis API.

This package hosts configuration helpers (env vars, paths) and
cross-cutting concerns such as logging setup. Repositories, services and
routers depend on these primitives instead of reading os.environ directly.
"""
