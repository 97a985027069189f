"""
Search analytics for the HTTP layer.

Events are recorded by the API handlers only; the matching engine stays
free of side effects.
"""
