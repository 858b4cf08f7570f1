"""Contains the tests for the models of a video."""
