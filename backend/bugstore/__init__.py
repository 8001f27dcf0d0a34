"""
BugStore - e-commerce domain layer

Customer, Product and Order entities with repository contracts and
in-memory implementations.
"""
__version__ = "1.0.0"
