"""LINE webhook bot running on AWS Lambda."""

__version__ = "1.0.0"
