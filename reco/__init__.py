"""
reco — score transformers for the recommendation scoring pipeline.
"""

__version__ = "0.1.0"
