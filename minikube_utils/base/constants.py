#: Name of the minikube executable.
MINIKUBE_BINARY = "minikube"

#: Settings section holding all minikube_utils options.
SETTINGS_SECTION = "minikube_utils"
#: Explicit path to the minikube binary.  Empty or missing means "look it up in PATH".
MINIKUBE_PATH_KEY = "minikube_path"
VM_DRIVER_KEY = "vm_driver"
ADDITIONAL_FLAGS_KEY = "additional_flags"

SETTINGS_KEYS = (MINIKUBE_PATH_KEY, VM_DRIVER_KEY, ADDITIONAL_FLAGS_KEY)

#: Overall status reported by minikube for a cluster that is not running.
STOPPED_STATUS = "Stopped"

#: Go template passed to ``minikube status --format``.  Makes minikube print a JSON
#: array [overall status, cluster status, kubeconfig status].
STATUS_FORMAT = '["{{.MinikubeStatus}}","{{.ClusterStatus}}","{{.KubeconfigStatus}}"]'

INDICATOR_STARTING = "minikube-starting"
INDICATOR_RUNNING = "minikube-running"
INDICATOR_STOPPING = "minikube-stopping"

LOG_LEVEL_ENV_VAR = "MINIKUBE_UTILS_LOG_LEVEL"
