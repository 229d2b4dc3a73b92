import sys

from folder_to_text.main import main

sys.exit(main())
