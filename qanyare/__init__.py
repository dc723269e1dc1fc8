"""
Qanyare restaurant manager

Menu, orders, reservations, reviews and back-office management over a REST API.
"""

__version__ = "1.0.0"
