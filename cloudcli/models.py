"""Data shapes exchanged with the cloud API and Kubernetes resource kinds."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Any


class K8sResourceKind(IntEnum):
    """Kind of a Kubernetes resource managed during a deployment."""

    CONFIG_MAP = 0
    SECRET = 1
    NAMESPACE = 2


@dataclass
class Status:
    """Operation status: an error code and its description."""

    code: int = 0
    message: str = ""


@dataclass
class ResponseWrapper:
    """Envelope around every API response: payload, status and error details."""

    payload: Any = None
    status: Status = field(default_factory=Status)
    error_reason: str = ""
    warning: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Render the envelope as a JSON-ready mapping, leaving out empty fields."""
        data: dict[str, Any] = {}
        if self.payload is not None:
            data["payload"] = self.payload
        data["status"] = {"code": self.status.code, "message": self.status.message}
        if self.error_reason:
            data["error"] = self.error_reason
        if self.warning:
            data["warning"] = self.warning
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ResponseWrapper:
        """Build an envelope from a decoded JSON mapping."""
        status = data.get("status") or {}
        return cls(
            payload=data.get("payload"),
            status=Status(
                code=int(status.get("code", 0)),
                message=str(status.get("message", "")),
            ),
            error_reason=str(data.get("error", "")),
            warning=str(data.get("warning", "")),
        )


@dataclass
class TypeMeta:
    """Identifier, name and timestamps common to every object."""

    id: str = ""
    name: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Organization(TypeMeta):
    """An organization and its plan subscription."""

    plan_id: str = ""
    plan_expire_time: datetime | None = None
    subscription_started_at: datetime | None = None
    owner_id: str = ""


@dataclass
class Cluster(TypeMeta):
    """A cluster belonging to an organization."""

    organization_id: str = ""
    region_id: str = ""
    status: int = 0
    domain: str = ""
    config_payload: str = ""


@dataclass
class ClusterSummary(Cluster):
    """A cluster together with the name of its organization."""

    org_name: str = ""


@dataclass
class GetOrganizationClusterResponsePayload:
    """Result of listing the clusters of an organization."""

    count: int = 0
    list: list[ClusterSummary] = field(default_factory=list)


@dataclass
class ClusterStartupConfigResponsePayload:
    """Startup configuration of a gateway."""

    configuration: str = ""


@dataclass
class TLSBundle:
    """A certificate, its private key and the issuing certificate."""

    certificate: str = ""
    private_key: str = ""
    ca_certificate: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TLSBundle:
        """Build a bundle from a decoded JSON mapping."""
        return cls(
            certificate=str(data.get("certificate", "")),
            private_key=str(data.get("private_key", "")),
            ca_certificate=str(data.get("ca_certificate", "")),
        )