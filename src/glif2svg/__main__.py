"""Run the glif2svg command with python -m glif2svg"""

import sys

from glif2svg.cli import main

sys.exit(main())
