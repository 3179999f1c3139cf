import sys

from delivery_fee.main import main

sys.exit(main())
