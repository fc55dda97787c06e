APP_NAME = "devkit"
ENV_PREFIX = "DEVKIT_CONFIG"
PROJECT_ROOT_ENV = "PRJ_ROOT"
