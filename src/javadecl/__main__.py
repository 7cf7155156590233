import sys

from javadecl.main import main

sys.exit(main())
