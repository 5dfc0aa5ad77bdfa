"""macOS dotfiles installer (Python-first, manifest-driven).

Core design goals:
- Sequential, fail-fast steps
- Declarative component manifest
- Never lose an existing file: back it up before linking over it
- Centralized logging
"""

__all__ = []
