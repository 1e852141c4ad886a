"""Configuration, logging, storage and security primitives."""
