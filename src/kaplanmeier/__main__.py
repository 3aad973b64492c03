"""
Entrypoint module, in case you use `python -mkaplanmeier`.
"""

from kaplanmeier.cli import main

if __name__ == "__main__":
    main()
