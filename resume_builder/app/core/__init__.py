"""Core services of the resume builder: settings, password hashing and token
issuance, the bearer-token authentication dependency, and shared exceptions.
"""
