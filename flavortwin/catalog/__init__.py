"""
Dish catalog.

Responsibilities:
- Ship a canonical, pre-resolved catalog of dishes across cuisines.
- Load it once per process as a DataFrame and as validated Dish records.
- Turn raw recipe dumps into that canonical catalog (offline).
"""
