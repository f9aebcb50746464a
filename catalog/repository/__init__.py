"""Repository layer: SQL building, row mapping and the per-catalog repositories.

Services call repositories; they never see SQL strings.
"""
from __future__ import annotations
