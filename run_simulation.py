import sys
import os

# Allow running from a source checkout without installing the package
project_root = os.path.dirname(os.path.abspath(__file__))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from wlansim.cli import main

if __name__ == "__main__":
    sys.exit(main())
