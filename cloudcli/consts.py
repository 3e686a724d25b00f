"""Names, defaults and timeouts shared across the command line tool."""

# Environment variable that overrides where the cloud Lua module is fetched from.
API7_CLOUD_LUA_MODULE_URL = "API7_CLOUD_LUA_MODULE_URL"
# Environment variable that selects the configuration profile to use.
API7_CLOUD_PROFILE = "API7_CLOUD_PROFILE"

# Default name of a deployment (container name, Helm release name).
DEFAULT_DEPLOYMENT_NAME = "apisix"

# Default names of the Kubernetes objects created during a deployment.
DEFAULT_CONFIG_MAP_NAME = "cloud-module"
DEFAULT_SECRET_NAME = "cloud-ssl"

# Timeouts, in seconds, for the external tools that are driven.
DEFAULT_KUBECTL_TIMEOUT = 60.0
DEFAULT_HELM_TIMEOUT = 300.0