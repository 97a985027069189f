"""
Recipe provider boundary.

Responsibilities:
- Talk to the remote recipe search/detail API over HTTP.
- Map its loosely-typed records onto the canonical Dish shape, once.
- Resolve a free-text dish name to a Dish (local catalog first).
"""
