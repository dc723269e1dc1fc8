"""
Domain Layer

Entity schemas and the storage contract, free of any framework or database code.
"""
