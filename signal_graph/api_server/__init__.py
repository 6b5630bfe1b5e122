"""
API server: HTTP front end for the signal catalog, evaluation and session.
"""
