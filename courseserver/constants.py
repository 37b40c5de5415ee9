"""Constants for the course server."""

# Content layout
ROOT_DESCRIPTOR = "course.yml"
TASKS_DIR = "tasks"
RESOURCES_DIR = "resources"
DESCRIPTOR_EXTENSION = ".yml"
REFERENCE_SEPARATOR = "."

# Server defaults
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 7310
DEFAULT_CONTENT_PATH = "courses/example"
DEFAULT_LOG_LEVEL = "INFO"

# Environment variables
ENV_PREFIX = "COURSE_"
ENV_CONFIG_FILE = "COURSE_CONFIG"

# Routes
STATIC_ROUTE = "/static"

# Error messages
ERROR_TASK_NOT_FOUND = "Could not load task"
ERROR_TASK_DECODE = "Could not decode task"
