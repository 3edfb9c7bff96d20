"""
idf-docker executes programs that have their own defaults.
These defaults rarely change, but if they do, they'll change what
ends up running inside the container or on the serial bridge.

To avoid such unexpected changes, we define our defaults here
and explicitly pass them to the programs.
"""

import sys


CONTAINER_CLI: str = "docker"
COMPOSE_SERVICE: str = "esp-idf"
COMPOSE_REMOVE_CONTAINER: bool = True
TOOLCHAIN: str = "idf.py"
SHELL: str = "bash"

BRIDGE_DIR: str = "esp_rfc2217_server"
BRIDGE_EXECUTABLE: str = "esp_rfc2217_server.exe" if sys.platform == "win32" else "esp_rfc2217_server"
BRIDGE_INSTALLER: str = "install_esp_rfc2217_server.bat" if sys.platform == "win32" else "install_esp_rfc2217_server.sh"
BRIDGE_VERBOSE: bool = True

# flash/monitor run inside the container, the bridge listens on the host
RFC2217_PORT: int = 4000
RFC2217_GATEWAY_HOST: str = "host.docker.internal"
RFC2217_URL_OPTIONS: str = "ign_set_control"
