# solid_principles/principles/__init__.py
"""
The five SOLID illustrations.

Every module in this package exposes an EXAMPLE (PrincipleExample) and is
picked up by the registry automatically; adding a module is all it takes.
"""
