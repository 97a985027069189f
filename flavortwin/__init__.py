"""
Flavor Twin service.

Finds cross-cuisine "flavor twin" dishes by comparing lexical flavor
vectors and nutritional parity.
"""
