"""
One-off operational commands.

Each module exposes ``main()`` and is installed as a console script
(see ``pyproject.toml``); they can also be run with ``python -m``.
Every command loads ``.env`` from the working directory before
touching the application package, because settings are read from the
environment at import time.
"""
