"""
Routers module - API endpoint handlers.

- generate: prompt-to-HTML generation
"""
