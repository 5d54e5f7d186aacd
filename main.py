"""
MQTT Fade Proxy - entry point

Runs next to an MQTT broker and republishes a light's power and brightness
commands as stepped brightness fades.
"""

import sys

from fade_proxy.main import main

if __name__ == "__main__":
    sys.exit(main())
