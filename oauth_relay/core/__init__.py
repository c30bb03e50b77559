"""Configuration, logging and error primitives."""
