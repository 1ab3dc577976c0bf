"""Domain layer — the Retry-After value and HTTP-date grammars.

This layer depends only on stdlib and pydantic.
It must never import from codec, header, result, or config.
"""
