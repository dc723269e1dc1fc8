"""
Application Layer

Use cases and the data transfer objects they exchange with the API.
"""
