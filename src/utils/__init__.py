"""
Utility modules for Review Insights.

Cross-cutting concerns:
- Storage: File I/O helpers for analysis outputs and dataset export
"""
