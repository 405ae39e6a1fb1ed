import sys

from stt_diarize.cli import main

sys.exit(main())
