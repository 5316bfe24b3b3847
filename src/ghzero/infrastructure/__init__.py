"""Infrastructure layer — the PyGithub gateway and git subprocess helpers.

This layer depends on stdlib and third-party libs (PyGithub, requests).
It must never import from commands or output.
"""
