import sys

from mongo_schema.cli import main

sys.exit(main())
