import os
import sys

# Ensure the project root is in path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from localesync.cli import main

if __name__ == "__main__":
    sys.exit(main())
