"""
Test suite for the dynentropy estimators.

Contains unit tests for the histogram builder and the entropy estimators, and an
integration test for the config-driven runner.
"""
