"""Directory tree construction honoring cascading .gitignore rules.

This package provides the node type, the directory scanner, the depth-first tree
builder and the summary pass, plus a lazily built FileSystemTree facade tying
them together.
"""
