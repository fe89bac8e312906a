"""Core business logic layer.

Subpackages:
- planning: candidate groups and the weekly dinner plan builder
- shopping: building shopping lists from a plan
- conversion: imperial to metric ingredient conversion
- reporting: plan summaries
"""
__all__ = ["planning", "shopping", "conversion", "reporting"]
