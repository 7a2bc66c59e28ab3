import sys

from mizbancloud.cli import main

sys.exit(main())
