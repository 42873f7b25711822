"""
High-level use cases for the Imoveis API.

Service modules orchestrate repositories and domain rules; routers call
these services instead of manipulating the Document directly.
"""
