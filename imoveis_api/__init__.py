"""Imoveis API: CRUD over real-estate listings stored in a JSON document."""

__version__ = "1.0.0"
