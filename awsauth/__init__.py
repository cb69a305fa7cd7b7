"""
aws-auth: manage named AWS credential profiles.
"""

__version__ = "1.0.0"
