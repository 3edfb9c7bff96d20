DEFAULT_SETTINGS_FILE = "idf-docker.yaml"

PROJECT_NAME_PROMPT = "Enter project name: "
TARGET_PROMPT = "Enter target chip (esp32, esp32s2, esp32s3, esp32c3, ...): "
SERIAL_DEVICE_PROMPT = "Enter serial device (e.g. COM3 or /dev/ttyUSB0): "

SERVER_VERSION_FORMAT = "{{.Server.Version}}"
NO_PROBE_OUTPUT = "docker version returned no output"
