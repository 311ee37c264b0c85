"""
Greeting function and local API Gateway tooling
"""

__version__ = "1.0.0"
