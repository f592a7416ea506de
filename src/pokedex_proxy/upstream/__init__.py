"""
Outbound collaborators.

Clients for third-party APIs live here, together with the error types they
raise so that route handlers never inspect raw HTTP errors.
"""
