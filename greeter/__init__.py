"""
Birthday Greeter
================

Keyword arguments and mass assignment, as a small layered service.
"""
