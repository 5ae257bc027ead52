"""
mongo-schema - infer MongoDB collection schemas from sampled documents.
"""

__version__ = "0.1.0"
