"""
schemaform - schema-driven interactive forms for project scaffolding

Turns a declarative schema of configuration parameters into a sequence of
terminal questions and folds the answers into a single parameter map.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
