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

"""Schemas of the ``core.database-mesh.io/v1alpha1`` custom resources."""

from .databasechaos import (
    DatabaseChaos,
    DatabaseChaosAction,
    DatabaseChaosCondition,
    DatabaseChaosConditionType,
    DatabaseChaosEvent,
    DatabaseChaosList,
    DatabaseChaosRecord,
    DatabaseChaosSpec,
    DatabaseChaosStatus,
    RecordEventType,
)
from .databaseclass import (
    ANNOTATIONS_AVAILABILITY_ZONES,
    ANNOTATIONS_CLUSTER_IDENTIFIER,
    ANNOTATIONS_INSTANCE_DB_NAME,
    ANNOTATIONS_INSTANCE_IDENTIFIER,
    ANNOTATIONS_MASTER_USER_PASSWORD,
    ANNOTATIONS_MASTER_USERNAME,
    ANNOTATIONS_SNAPSHOT_IDENTIFIER,
    ANNOTATIONS_SUBNET_GROUP_NAME,
    ANNOTATIONS_VPC_SECURITY_GROUP_IDS,
    PROVISIONER_AWS_AURORA,
    PROVISIONER_AWS_RDS_CLUSTER,
    PROVISIONER_AWS_RDS_INSTANCE,
    DatabaseClass,
    DatabaseClassList,
    DatabaseClassSpec,
    DatabaseClassStatus,
    DatabaseReclaimPolicy,
    DatabaseStorage,
)
from .databaseendpoint import (
    Database,
    DatabaseEndpoint,
    DatabaseEndpointList,
    DatabaseEndpointSpec,
    DatabaseEndpointStatus,
    MySQL,
)
from .datashard import (
    ActualDatanodesExpressionValue,
    ActualDatanodesNodeValue,
    ActualDatanodesValue,
    DatabaseStrategy,
    DatabaseTableStrategy,
    DataShard,
    DataShardList,
    DataShardSpec,
    DataShardStatus,
    ReadWriteSplittingGroup,
    ShardingRule,
    TableStrategy,
    ValueFrom,
    ValueFromReadWriteSplitting,
    ValueSourceType,
)
from .meta import (
    API_VERSION,
    GROUP,
    VERSION,
    ConditionStatus,
    LabelSelector,
    LabelSelectorRequirement,
    ListMeta,
    ManagedFieldsEntry,
    ObjectMeta,
    OwnerReference,
    Resource,
    ResourceList,
)
from .qosclaim import QoSClaim, QoSClaimList, QoSClaimSpec, QoSClaimStatus, QoSGroup, TrafficQoS
from .trafficstrategy import (
    CircuitBreak,
    ConcurrencyControl,
    ConnectionProbe,
    LoadBalance,
    LoadBalanceAlgorithm,
    MasterHighAvailability,
    PingProbe,
    Probe,
    ReadOnlyProbe,
    ReadWriteDiscovery,
    ReadWriteSplitting,
    ReadWriteSplittingDynamic,
    ReadWriteSplittingRule,
    ReadWriteSplittingStatic,
    ReplicationLagProbe,
    RuleType,
    SimpleLoadBalance,
    TrafficStrategy,
    TrafficStrategyList,
    TrafficStrategySpec,
)
from .virtualdatabase import (
    DatabaseMySQL,
    DatabaseService,
    VirtualDatabase,
    VirtualDatabaseList,
    VirtualDatabaseService,
    VirtualDatabaseSpec,
    VirtualDatabaseStatus,
)


# Root kinds, in registration order
RESOURCES = (
    DatabaseChaos,
    DatabaseClass,
    DatabaseEndpoint,
    DataShard,
    QoSClaim,
    TrafficStrategy,
    VirtualDatabase,
)
