import sys

from sundial_designer.cli import main

sys.exit(main())
