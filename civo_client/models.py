from datetime import datetime
from functools import lru_cache
from typing import Any, Optional, get_origin

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError

from .exceptions import DecodeError


class ResponseModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    @field_validator('*', mode='before')
    @classmethod
    def null_as_default(cls, value, info: ValidationInfo):
        # null on the wire means "unset", same as a missing key
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class RequestModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    region: str = ''

    def for_region(self, region: str):
        if self.region:
            return self
        return self.model_copy(update={'region': region})

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)


class SimpleResponse(ResponseModel):
    id: str = ''
    name: str = ''
    result: str = ''
    error_code: str = ''
    error_reason: str = ''
    error_details: str = ''


class Volume(ResponseModel):
    id: str = ''
    name: str = ''
    instance_id: str = ''
    cluster_id: str = ''
    network_id: str = ''
    mount_point: str = Field('', alias='mountpoint')
    status: str = ''
    volume_type: str = ''
    size_gb: int = 0
    bootable: bool = False
    created_at: Optional[datetime] = None


class VolumeResult(ResponseModel):
    id: str = ''
    name: str = ''
    result: str = ''


class VolumeConfig(RequestModel):
    name: str
    namespace: str = ''
    cluster_id: str = ''
    network_id: str = ''
    size_gb: int = 0
    bootable: bool = False
    volume_type: str = ''
    # clone source, left out of the body when unset
    snapshot_id: Optional[str] = None


class VolumeAttachConfig(RequestModel):
    instance_id: str
    attach_at_boot: bool = False


class VolumeSnapshot(ResponseModel):
    snapshot_id: str = ''
    name: str = ''
    snapshot_description: str = ''
    volume_id: str = ''
    instance_id: str = ''
    source_volume_name: str = ''
    restore_size: int = 0
    state: str = ''
    creation_time: Optional[datetime] = None


class VolumeSnapshotConfig(RequestModel):
    name: str
    description: Optional[str] = None


class Firewall(ResponseModel):
    id: str = ''
    name: str = ''
    rules_count: int = 0
    instances_count: int = 0
    region: str = ''
    network_id: str = ''

    @field_validator('rules_count', 'instances_count', mode='before')
    @classmethod
    def empty_count(cls, value):
        # the API has sent counts as strings, including ''
        if value == '':
            return 0
        return value


class FirewallResult(ResponseModel):
    id: str = ''
    name: str = ''
    result: str = ''


class FirewallConfig(RequestModel):
    name: str
    network_id: Optional[str] = None


class FirewallRule(ResponseModel):
    id: str = ''
    firewall_id: str = ''
    protocol: str = ''
    start_port: str = ''
    end_port: str = ''
    cidr: list[str] = []
    direction: str = ''
    label: Optional[str] = None
    action: Optional[str] = None


class FirewallRuleConfig(RequestModel):
    firewall_id: str = ''
    protocol: str = ''
    start_port: str = ''
    end_port: str = ''
    cidr: list[str] = []
    direction: str = ''
    label: Optional[str] = None
    action: Optional[str] = None


class KubernetesCluster(ResponseModel):
    id: str = ''
    name: str = ''
    status: str = ''
    version: str = ''
    network_id: str = ''
    firewall_id: str = ''
    num_target_nodes: int = 0
    created_at: Optional[datetime] = None


class PaginatedKubernetesClusters(ResponseModel):
    page: int = 0
    per_page: int = 0
    pages: int = 0
    items: list[KubernetesCluster] = []


@lru_cache(maxsize=None)
def _adapter(schema) -> TypeAdapter:
    return TypeAdapter(schema)


def decode(schema, data: Any):
    if data is None and get_origin(schema) is list:
        return []
    try:
        return _adapter(schema).validate_python(data)
    except PydanticValidationError as e:
        raise DecodeError(f'Unexpected response for {schema}: {e}') from e
