import sys

from tinyscript.cli import main

sys.exit(main())
