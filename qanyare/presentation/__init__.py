"""
Presentation Layer

HTTP surface of the restaurant service.
"""
