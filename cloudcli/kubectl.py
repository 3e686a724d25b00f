"""Queries about a gateway deployed on Kubernetes, made through kubectl."""

from __future__ import annotations

from typing import Any

from cloudcli import consts, options, output
from cloudcli.commands import CommandError


def _instance_selector() -> str:
    return f"app.kubernetes.io/instance={options.GLOBAL.deploy.name}"


def _run_kubectl(kubectl: Any) -> str:
    if options.GLOBAL.dry_run:
        output.info(f"Running:\n{kubectl}\n")
    else:
        output.verbose(f"Running:\n{kubectl}\n")

    try:
        stdout, stderr = kubectl.run(consts.DEFAULT_KUBECTL_TIMEOUT)
    except CommandError as exc:
        if exc.stderr:
            output.warn(exc.stderr)
        if exc.stdout:
            output.verbose(exc.stdout)
        raise
    if stderr:
        output.warn(stderr)
    if stdout:
        output.verbose(stdout)
    return stdout


def get_deployment_name(kubectl: Any) -> str:
    """Return the name of the gateway's Deployment."""
    namespace = options.GLOBAL.deploy.kubernetes.namespace
    kubectl.append_args("get", "deployment", "-n", namespace)
    kubectl.append_args("-l", _instance_selector())
    kubectl.append_args("-o", 'jsonpath="{.items[0].metadata.name}"')
    return _run_kubectl(kubectl)


def get_pods_names(kubectl: Any) -> list[str]:
    """Return the names of the gateway's pods."""
    namespace = options.GLOBAL.deploy.kubernetes.namespace
    kubectl.append_args("get", "pods", "-n", namespace)
    kubectl.append_args("-l", _instance_selector())
    kubectl.append_args("-o", 'jsonpath="{.items[*].metadata.name}"')
    stdout = _run_kubectl(kubectl)
    return stdout.replace('"', "").split(" ")


def get_apisix_id(kubectl: Any, pod_name: str) -> str:
    """Wait for a pod to be ready and return the gateway instance id inside it."""
    namespace = options.GLOBAL.deploy.kubernetes.namespace
    kubectl.append_args("wait", "--for", "condition=Ready", "--timeout", "60s")
    kubectl.append_args(f"pod/{pod_name}", "-n", namespace)
    _run_kubectl(kubectl)

    kubectl.append_args("exec", pod_name, "-n", namespace)
    kubectl.append_args("--", "cat", "/usr/local/apisix/conf/apisix.uid")
    return _run_kubectl(kubectl)


def get_service_name(kubectl: Any) -> str:
    """Return the name of the gateway's Service."""
    namespace = options.GLOBAL.deploy.kubernetes.namespace
    kubectl.append_args("get", "service", "-n", namespace)
    kubectl.append_args("-l", _instance_selector())
    kubectl.append_args("-o", 'jsonpath="{.items[0].metadata.name}"')
    return _run_kubectl(kubectl)