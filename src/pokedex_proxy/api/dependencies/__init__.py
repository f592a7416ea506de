"""
FastAPI dependencies for request processing.

Dependencies provide reusable logic that can be injected into API endpoints,
such as access to the shared upstream client.
"""
