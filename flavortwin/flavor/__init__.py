"""
Flavor vector layer.

Responsibilities:
- Hold the fixed flavor dimensions and the ingredient keyword table.
- Map free-text ingredient lists onto raw flavor-intensity vectors.
- Rescale raw vectors for display (never for scoring).
"""
