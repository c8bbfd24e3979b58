# Path: typed_string/__main__.py
"""Allow running as: python -m typed_string"""

from .main import main

if __name__ == '__main__':
    main()
