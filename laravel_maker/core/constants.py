"""Constants used throughout the Laravel Maker application."""


# Environment files
ENV_FILE = ".env"
EXAMPLE_ENV_FILE = "env.example"

# Defaults applied when a key is missing, empty or invalid
DEFAULT_CONTAINER_NAME = "dev_container"
DEFAULT_SERVER_PORT = 8000
DEFAULT_DB_PORT = 3306
DEFAULT_DB_ROOT_PASSWORD = "password"

# Derived container suffixes
PHP_CONTAINER_SUFFIX = "_php"
NODE_CONTAINER_SUFFIX = "_node"

# Laravel versions
DEFAULT_LARAVEL_VERSION = 12
MINIMAL_LARAVEL_VERSION = 10
MAXIMAL_LARAVEL_VERSION = 255

# Project layout
TLD_SUFFIX = "test"
PROJECTS_DIR = "../src"
CONTAINER_WEB_ROOT = "/var/www/html"
PROVISIONING_MARKER_DIR = "docker"
VHOSTS_DIR = "docker/apache/vhosts"

# Docker
DOCKER_EXECUTABLE = "docker"
PROXY_SERVICE = "apache"
DB_SERVICE_HOST = "mariadb"
DB_CONNECTION = "mariadb"
DB_USERNAME = "root"

# Readiness polling
READINESS_MAX_ATTEMPTS = 3
READINESS_INTERVAL = 3.0  # seconds
PROXY_SETTLE_DELAY = 1.0  # seconds

# Host aliases
HOSTS_FILE = "/etc/hosts"
LOOPBACK_ADDRESS = "127.0.0.1"
