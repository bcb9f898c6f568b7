"""
Tests for the users auth service.

Covers the request handler routes, the authentication workflow, the
credential store implementations, and the hashing and token utilities.
"""
