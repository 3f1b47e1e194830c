import sys

from motorpool.demo import main

sys.exit(main())
