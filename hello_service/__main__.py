# =============================================================================
# hello_service/__main__.py - Module Entry Point
# =============================================================================
# Usage:
#   python -m hello_service [--host HOST] [--port PORT]
# =============================================================================

import sys

from hello_service.server import run

if __name__ == "__main__":
    sys.exit(run())
