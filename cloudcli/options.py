"""Option sets for every command, and the process-wide option holder."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class CertificateType(str, Enum):
    """Role of a certificate held by the cloud."""

    SERVER = "Server"
    CLIENT = "Client"


def _valid_port(port: int) -> bool:
    return 0 < port <= 65535


@dataclass
class DockerDeployOptions:
    """Options for deploying onto Docker."""

    apisix_image: str = ""
    docker_run_args: list[str] = field(default_factory=list)
    docker_cli_path: str = ""
    http_host_port: int = 0
    https_host_port: int = 0
    local_cache_bind_path: str = ""

    def validate(self) -> None:
        """Raise ValueError when a host port is out of range."""
        if not _valid_port(self.http_host_port):
            raise ValueError("invalid http host port")
        if not _valid_port(self.https_host_port):
            raise ValueError("invalid https host port")


@dataclass
class KubernetesDeployOptions:
    """Options for deploying onto Kubernetes with kubectl and Helm."""

    namespace: str = ""
    apisix_image: str = ""
    apisix_image_repo: str = ""
    apisix_image_tag: str = ""
    replica_count: int = 0
    helm_install_args: list[str] = field(default_factory=list)
    kubectl_cli_path: str = ""
    helm_cli_path: str = ""
    local_cache_pvc: str = ""


@dataclass
class BareDeployOptions:
    """Options for deploying onto bare metal."""

    apisix_version: str = ""
    apisix_bin_path: str = ""
    reload: bool = False
    upgrade: bool = False


@dataclass
class DeployOptions:
    """Options for the deploy command."""

    name: str = ""
    apisix_instance_id: str = ""
    apisix_config_file: str = ""
    docker: DockerDeployOptions = field(default_factory=DockerDeployOptions)
    bare: BareDeployOptions = field(default_factory=BareDeployOptions)
    kubernetes: KubernetesDeployOptions = field(default_factory=KubernetesDeployOptions)


@dataclass
class DockerStopOptions:
    """Options for stopping a Docker deployment."""

    docker_cli_path: str = ""


@dataclass
class KubernetesStopOptions:
    """Options for stopping a Kubernetes deployment."""

    namespace: str = ""
    helm_uninstall_args: list[str] = field(default_factory=list)
    kubectl_cli_path: str = ""
    helm_cli_path: str = ""


@dataclass
class StopOptions:
    """Options for the stop command."""

    name: str = ""
    remove: bool = False
    docker: DockerStopOptions = field(default_factory=DockerStopOptions)
    kubernetes: KubernetesStopOptions = field(default_factory=KubernetesStopOptions)


@dataclass
class DebugShowConfigOptions:
    """Options for showing the translated configuration of a resource."""

    id: int = 0


@dataclass
class DebugOptions:
    """Options for the debug command."""

    show_config: DebugShowConfigOptions = field(default_factory=DebugShowConfigOptions)


@dataclass
class ConfigureOptions:
    """Options for the configure command."""

    addr: str = ""
    profile: str = ""
    default: bool = False
    access_token: str = ""


@dataclass
class SSLModifyOptions:
    """Files and role of a certificate being created or updated."""

    cert_file: str = ""
    pkey_file: str = ""
    ca_cert_file: str = ""
    type: CertificateType | None = None

    def validate(self) -> None:
        """Raise ValueError when a required file or the role is missing."""
        if not self.cert_file:
            raise ValueError("cert file is required")
        if not self.pkey_file:
            raise ValueError("private key file is required")
        if self.type not in (CertificateType.SERVER, CertificateType.CLIENT):
            raise ValueError('invalid SSL type, should either be "Server" or "Client"')


def _validate_kind(kind: str, ssl: SSLModifyOptions) -> None:
    if not kind:
        raise ValueError("--kind is required")
    if kind == "ssl":
        ssl.validate()


@dataclass
class ResourceCreateOptions:
    """Options for creating a resource."""

    kind: str = ""
    ssl: SSLModifyOptions = field(default_factory=SSLModifyOptions)
    labels: list[str] = field(default_factory=list)
    from_file: str = ""

    def validate(self) -> None:
        """Raise ValueError when the kind or its settings are invalid."""
        _validate_kind(self.kind, self.ssl)


@dataclass
class ResourceUpdateOptions:
    """Options for updating a resource."""

    id: str = ""
    kind: str = ""
    ssl: SSLModifyOptions = field(default_factory=SSLModifyOptions)
    labels: list[str] = field(default_factory=list)
    from_file: str = ""

    def validate(self) -> None:
        """Raise ValueError when the kind or its settings are invalid."""
        _validate_kind(self.kind, self.ssl)


@dataclass
class ResourceListOptions:
    """Options for listing resources."""

    kind: str = ""
    limit: int = 0
    skip: int = 0
    service_id: str = ""

    def validate(self) -> None:
        """Raise ValueError when limit or skip is out of range."""
        if self.limit <= 0:
            raise ValueError("invalid limit number")
        if self.skip < 0:
            raise ValueError("invalid skip number")


@dataclass
class ResourceDeleteOptions:
    """Options for deleting a resource."""

    kind: str = ""
    id: str = ""
    service_id: str = ""


@dataclass
class ResourceGetOptions:
    """Options for fetching a resource."""

    kind: str = ""
    id: str = ""
    service_id: str = ""


@dataclass
class ResourceOptions:
    """Options for the resource command and its sub-commands."""

    list: ResourceListOptions = field(default_factory=ResourceListOptions)
    get: ResourceGetOptions = field(default_factory=ResourceGetOptions)
    delete: ResourceDeleteOptions = field(default_factory=ResourceDeleteOptions)
    create: ResourceCreateOptions = field(default_factory=ResourceCreateOptions)
    update: ResourceUpdateOptions = field(default_factory=ResourceUpdateOptions)


@dataclass
class Options:
    """All options of the command line tool."""

    verbose: bool = False
    dry_run: bool = False
    profile: str = ""
    deploy: DeployOptions = field(default_factory=DeployOptions)
    stop: StopOptions = field(default_factory=StopOptions)
    debug: DebugOptions = field(default_factory=DebugOptions)
    resource: ResourceOptions = field(default_factory=ResourceOptions)
    configure: ConfigureOptions = field(default_factory=ConfigureOptions)


GLOBAL = Options()