"""Test suite package marker to ensure deterministic module names."""

# Package semantics keep ``tests.test_angles`` and ``tests.property.test_angles``
# from shadowing each other during collection.
