import sys

from qcm.cli import main

sys.exit(main())
