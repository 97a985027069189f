"""
Flavor twin matching engine.

Responsibilities:
- Score a candidate dish against a source dish (flavor cosine + nutrition).
- Extract the flavor traits two dishes share.
- Filter a catalog to cross-cuisine candidates, rank and truncate them.
"""
