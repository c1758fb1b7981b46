"""Allow running as ``python -m my_ui``"""

from .cli.main import main

if __name__ == "__main__":
    main()
