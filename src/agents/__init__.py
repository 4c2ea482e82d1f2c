"""
Pipeline stages for Review Insights.

Contains the modules that process reviews, in pipeline order:
- Ingestion Agent (CSV parser adapter)
- Review Normalizer
- Review Filter
- Review sorting
- Stats Aggregator
- Word Frequency Analyzer
"""
