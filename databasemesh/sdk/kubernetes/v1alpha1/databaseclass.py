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

"""DatabaseClass: how databases are provisioned by a given provisioner."""

from .meta import SCOPE_CLUSTER, KubeModel, Resource, ResourceList
from enum import Enum
from pydantic import Field
from typing import ClassVar, Dict, List


ANNOTATIONS_VPC_SECURITY_GROUP_IDS = 'databaseclass.database-mesh.io/vpc-security-group-ids'
ANNOTATIONS_SUBNET_GROUP_NAME = 'databaseclass.database-mesh.io/vpc-subnet-group-name'
ANNOTATIONS_AVAILABILITY_ZONES = 'databaseclass.database-mesh.io/availability-zones'
ANNOTATIONS_CLUSTER_IDENTIFIER = 'databaseclass.database-mesh.io/cluster-identifier'
ANNOTATIONS_INSTANCE_IDENTIFIER = 'databaseclass.database-mesh.io/instance-identifier'
ANNOTATIONS_INSTANCE_DB_NAME = 'databaseclass.database-mesh.io/instance-db-name'
ANNOTATIONS_SNAPSHOT_IDENTIFIER = 'databaseclass.database-mesh.io/snapshot-identifier'
ANNOTATIONS_MASTER_USERNAME = 'databaseclass.database-mesh.io/master-username'
ANNOTATIONS_MASTER_USER_PASSWORD = 'databaseclass.database-mesh.io/master-user-password'

PROVISIONER_AWS_RDS_INSTANCE = 'databaseclass.database-mesh.io/aws-rds-instance'
PROVISIONER_AWS_RDS_CLUSTER = 'databaseclass.database-mesh.io/aws-rds-cluster'
PROVISIONER_AWS_AURORA = 'databaseclass.database-mesh.io/aws-aurora'


class DatabaseReclaimPolicy(str, Enum):
    """What happens to a provisioned database when its claim goes away."""

    # deleted, with a final snapshot kept
    DELETE_WITH_FINAL_SNAPSHOT = 'DeleteWithFinalSnapshot'
    DELETE = 'Delete'
    # default
    RETAIN = 'Retain'


class DatabaseStorage(KubeModel):
    allocated_storage: int = 0
    iops: int = 0


class DatabaseClassSpec(KubeModel):
    """Desired state of a DatabaseClass."""

    provisioner: str = Field(..., description='Provisioner, e.g. PROVISIONER_AWS_AURORA')
    parameters: Dict[str, str] = Field(
        default_factory=dict, description='Provisioner specific parameters'
    )
    reclaim_policy: DatabaseReclaimPolicy = Field(
        DatabaseReclaimPolicy.RETAIN, description='Reclaim policy of provisioned databases'
    )


class DatabaseClassStatus(KubeModel):
    pass


class DatabaseClass(Resource):
    """Cluster scoped description of a class of databases."""

    plural: ClassVar[str] = 'databaseclasses'
    short_names: ClassVar[List[str]] = ['dc']
    scope: ClassVar[str] = SCOPE_CLUSTER

    kind: str = 'DatabaseClass'
    spec: DatabaseClassSpec
    status: DatabaseClassStatus = Field(default_factory=DatabaseClassStatus)


class DatabaseClassList(ResourceList):
    kind: str = 'DatabaseClassList'
    items: List[DatabaseClass] = Field(default_factory=list)
