"""Git branch management tool.

Features:
- List local branches sorted and numbered
- Delete branches by name pattern (*prefix, suffix*, *substring*)
- Delete branches by list number (2,4 or 1-3)
- Keep only the named branches and delete the rest
- Confirmation before anything is deleted; the current branch is never deleted
- Force option for unmerged branches
"""

__version__ = "0.1.0"
