"""
Application layer.

Services that coordinate the domain model with storage through repository
ports and a unit of work.
"""
