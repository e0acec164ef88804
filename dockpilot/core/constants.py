"""Constants used throughout the dockpilot application."""


# Configuration
DATA_DIR_NAME = ".dockpilot"
DATA_DIR_ENV = "DOCKPILOT_HOME"
CONFIG_FILE_NAME = "config.json"

# Log streaming
LOG_CHANNEL_CAPACITY = 100
# Seconds a blocked producer waits before re-checking for termination
LOG_PUT_INTERVAL = 0.25

# Shell access
DEFAULT_EXEC_SHELL = "sh"
SHELL_COMMAND_TEMPLATE = "docker exec -it {name} {shell}"

# Operation messages
MSG_STARTED = "Container started"
MSG_STOPPED = "Container stopped"
MSG_RESTARTED = "Container restarted"
MSG_DELETED = "Deleted container"
MSG_INVALID_OPERATION = "Invalid operation type"
MSG_PORT_NOT_AVAILABLE = "port not available"
