# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Kubernetes object metadata shared by every database-mesh resource.

Models use snake_case attributes and serialize to the camelCase JSON keys of
the Kubernetes API. Both spellings are accepted on input.
"""

from datetime import datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, ClassVar, Dict, List, Optional


GROUP = 'core.database-mesh.io'
VERSION = 'v1alpha1'
API_VERSION = f'{GROUP}/{VERSION}'

SCOPE_NAMESPACED = 'Namespaced'
SCOPE_CLUSTER = 'Cluster'


class KubeModel(BaseModel):
    """Base model mapping snake_case attributes to camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        """Dump to API JSON form, leaving out unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True, mode='json')


class ConditionStatus(str, Enum):
    """Status of a condition."""

    TRUE = 'True'
    FALSE = 'False'
    UNKNOWN = 'Unknown'


class LabelSelectorRequirement(KubeModel):
    """A selector requirement relating a label key to a set of values."""

    key: str = Field(..., description='Label key the selector applies to')
    operator: str = Field(..., description='One of In, NotIn, Exists and DoesNotExist')
    values: Optional[List[str]] = Field(None, description='Values matched by In and NotIn')


class LabelSelector(KubeModel):
    """Label query over a set of resources; the requirements are ANDed."""

    match_labels: Optional[Dict[str, str]] = Field(None, description='Exact label matches')
    match_expressions: Optional[List[LabelSelectorRequirement]] = Field(
        None, description='Set-based label requirements'
    )


class OwnerReference(KubeModel):
    """Reference to an owning object, used by garbage collection."""

    api_version: str = Field(..., description='API version of the owner')
    kind: str = Field(..., description='Kind of the owner')
    name: str = Field(..., description='Name of the owner')
    uid: str = Field(..., description='UID of the owner')
    controller: Optional[bool] = Field(None, description='Whether the owner is the controller')
    block_owner_deletion: Optional[bool] = Field(
        None, description='Whether the owner cannot be deleted before this object'
    )


class ManagedFieldsEntry(KubeModel):
    """Fields owned by one manager under server-side apply."""

    manager: Optional[str] = Field(None, description='Workflow managing the fields')
    operation: Optional[str] = Field(None, description='Apply or Update')
    api_version: Optional[str] = Field(None, description='Version the field set applies to')
    time: Optional[datetime] = Field(None, description='Time of the last change')
    fields_type: Optional[str] = Field(None, description='Format of fields_v1')
    fields_v1: Optional[Dict[str, Any]] = Field(
        None, alias='fieldsV1', description='Set of managed fields'
    )
    subresource: Optional[str] = Field(None, description='Subresource the fields belong to')


class ObjectMeta(KubeModel):
    """Metadata every persisted resource carries.

    Keys without a matching field are kept and written back by ``to_dict``.
    """

    model_config = ConfigDict(extra='allow')

    name: Optional[str] = Field(None, description='Name, unique within a namespace')
    generate_name: Optional[str] = Field(None, description='Prefix used to generate a name')
    namespace: Optional[str] = Field(None, description='Namespace of namespaced resources')
    uid: Optional[str] = Field(None, description='Unique identifier set by the server')
    resource_version: Optional[str] = Field(None, description='Version used for concurrency')
    generation: Optional[int] = Field(None, description='Generation of the desired state')
    creation_timestamp: Optional[datetime] = Field(None, description='Creation time')
    deletion_timestamp: Optional[datetime] = Field(None, description='Requested deletion time')
    deletion_grace_period_seconds: Optional[int] = Field(
        None, description='Seconds allowed for graceful termination'
    )
    labels: Optional[Dict[str, str]] = Field(None, description='Labels for selection')
    annotations: Optional[Dict[str, str]] = Field(None, description='Arbitrary metadata')
    owner_references: Optional[List[OwnerReference]] = Field(
        None, description='Objects this object depends on'
    )
    finalizers: Optional[List[str]] = Field(None, description='Finalizers blocking deletion')
    managed_fields: Optional[List[ManagedFieldsEntry]] = Field(
        None, description='Field ownership by manager'
    )


class ListMeta(KubeModel):
    """Metadata of a resource list."""

    resource_version: Optional[str] = Field(None, description='Version of the list')
    continue_: Optional[str] = Field(None, alias='continue', description='Next page token')
    remaining_item_count: Optional[int] = Field(None, description='Items left after this page')


class Resource(KubeModel):
    """Root of a custom resource kind.

    Subclasses declare their kind along with the resource name data
    the API server registers for it.
    """

    group: ClassVar[str] = GROUP
    version: ClassVar[str] = VERSION
    plural: ClassVar[str] = ''
    short_names: ClassVar[List[str]] = []
    scope: ClassVar[str] = SCOPE_NAMESPACED

    api_version: str = Field(API_VERSION, description='Versioned schema of this object')
    kind: str = Field('', description='Kind of this object')
    metadata: ObjectMeta = Field(default_factory=ObjectMeta, description='Object metadata')


class ResourceList(KubeModel):
    """List of resources of one kind."""

    api_version: str = Field(API_VERSION, description='Versioned schema of this object')
    kind: str = Field('', description='Kind of this list')
    metadata: ListMeta = Field(default_factory=ListMeta, description='List metadata')
