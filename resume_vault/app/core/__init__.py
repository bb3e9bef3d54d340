"""Core configuration for the resume vault application.

Notes:
    1. Settings live in the config submodule.
    2. This file performs no operations and is used solely for package initialization.

"""
