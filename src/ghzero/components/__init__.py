"""Component layer — validated GitHub operations returning ComponentResult.

Components may import from infrastructure and config models.
They must never import from commands or output.
"""
