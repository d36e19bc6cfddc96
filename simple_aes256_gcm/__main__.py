import sys

from simple_aes256_gcm.cli import main

sys.exit(main())
